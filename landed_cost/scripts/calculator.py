"""
Landed Cost Calculator
======================

Interactive CLI tool to calculate the landed cost of a single shipment.

Usage:
    python -m landed_cost.scripts.calculator
"""

from landed_cost import Shipment, compute_landed_cost
from landed_cost.models import CostBreakdown
from landed_cost.version import VERSION
from shared.currency import HOME_CURRENCY, format_currency, get_last_update_date, get_rates
from shared.lookups import DutyTable, FreightRateTable
from shared.reference import (
    COMMON_CURRENCIES,
    HSN_CODES,
    ORIGIN_COUNTRIES,
    destination_locations,
    origin_locations,
)
from shared.terms import CONTAINER_TYPES, INCOTERMS, SHIPPING_MODES, ShippingMode


def choose(label: str, options: list[str], default: str | None = None) -> str:
    """Numbered menu; accepts a number or a free-text value."""
    print(f"\n{label}:")
    for i, option in enumerate(options, 1):
        print(f"  {i}. {option}")

    prompt = f"Choice [default: {default}]: " if default else "Choice: "
    answer = input(prompt).strip()
    if not answer and default:
        return default
    if answer.isdigit() and 1 <= int(answer) <= len(options):
        return options[int(answer) - 1]
    return answer


def get_user_input() -> dict:
    """Prompt user for shipment details."""
    print("\n=== Landed Cost Calculator ===")
    print(f"Version: {VERSION}\n")

    # Product
    product_name = input("Product name: ").strip()
    product_cost = float(input("Product cost: "))
    currency = choose(
        "Currency",
        [c.code for c in COMMON_CURRENCIES],
        default="USD",
    )

    # Shipping
    shipping_mode = choose("Shipping mode", SHIPPING_MODES)
    incoterm = choose("Incoterm", INCOTERMS, default="FOB")

    container_type = None
    if shipping_mode == ShippingMode.SEA_FCL.value:
        container_type = choose("Container type", CONTAINER_TYPES, default=CONTAINER_TYPES[0])

    # Route
    origin_country = choose("Origin country", ORIGIN_COUNTRIES)
    origin_port = choose("Origin port", origin_locations(origin_country, shipping_mode))
    destination_port = choose("Destination port", destination_locations(shipping_mode))

    # Classification
    print(f"\nCommon HSN codes: {', '.join(HSN_CODES)}")
    classification_code = input("HSN code: ").strip()

    # Packages
    unit = "cm" if shipping_mode == ShippingMode.AIR.value else "m"
    gross_weight_kg = float(input("\nGross weight (kg): "))
    package_count = int(input("Number of packages: "))
    length = float(input(f"Length ({unit}): "))
    width = float(input(f"Width ({unit}): "))
    height = float(input(f"Height ({unit}): "))

    return {
        "product_name": product_name,
        "product_cost": product_cost,
        "currency": currency,
        "shipping_mode": shipping_mode,
        "incoterm": incoterm,
        "container_type": container_type,
        "origin_country": origin_country,
        "origin_port": origin_port,
        "destination_port": destination_port,
        "classification_code": classification_code,
        "gross_weight_kg": gross_weight_kg,
        "package_count": package_count,
        "length": length,
        "width": width,
        "height": height,
    }


def money(amount: float | None) -> str:
    return format_currency(amount, HOME_CURRENCY)


def print_results(breakdown: CostBreakdown, shipment: Shipment) -> None:
    """Print calculation results."""
    details = breakdown.details

    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    # Input summary
    print(f"\nProduct: {shipment.product_name or '-'} ({format_currency(shipment.product_cost, shipment.currency)})")
    print(f"Mode: {breakdown.shipping_mode}, {breakdown.incoterm}")
    print(f"Route: {shipment.origin_port}, {shipment.origin_country} -> {shipment.destination_port}")
    print(f"Exchange rates as of: {get_last_update_date() or 'fallback table'}")

    # Mode details
    if breakdown.shipping_mode == ShippingMode.SEA_FCL.value:
        print(f"\nContainer: {details.container_type}")
        print(f"Package volume: {details.package_cbm:.3f} CBM, total {details.total_cbm:.3f} CBM")
        print(f"20ft: {details.packages_per_20ft} per container, {details.required_20ft} required")
        print(f"40ft: {details.packages_per_40ft} per container, {details.required_40ft} required")
        if details.error:
            print(f"Warning: {details.error}")
    elif breakdown.shipping_mode == ShippingMode.SEA_LCL.value:
        print(f"\nPackage volume: {details.package_cbm:.3f} CBM, total {details.total_cbm:.3f} CBM")
    else:
        print(f"\nVolumetric weight: {details.volumetric_weight_kg:.2f} kg")
        print(f"Chargeable weight: {details.chargeable_weight_kg:.2f} kg", end="")
        if details.uses_volumetric_weight:
            print(" (volumetric)")
        else:
            print(" (actual)")

    # Cost breakdown
    print("\n--- Cost Breakdown ---")
    print(f"Product cost:        {money(breakdown.product_cost_home):>16}")
    print(f"Freight:             {money(breakdown.freight_only_home):>16}")
    for key, amount in breakdown.other_charges.items():
        label = key.replace("_", " ").capitalize() + ":"
        print(f"{label:<21}{money(amount):>16}")
    print(f"                     {'-' * 16}")
    print(f"Total freight:       {money(breakdown.total_freight_home):>16}")
    duty_label = f"Customs duty ({breakdown.duty_percentage:g}%):"
    print(f"{duty_label:<21}{money(breakdown.customs_duty_home):>16}")
    print(f"                     {'=' * 16}")
    print(f"TOTAL LANDED COST:   {money(breakdown.total_landed_cost_home):>16}")
    print()


def main():
    """Main entry point."""
    try:
        # Get user input
        shipment = Shipment.from_dict(get_user_input())

        # Run through pipeline
        breakdown = compute_landed_cost(
            shipment,
            duty_lookup=DutyTable(),
            freight_lookup=FreightRateTable(),
            rates=get_rates(),
        )

        # Print results
        print_results(breakdown, shipment)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
