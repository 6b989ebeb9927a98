"""
Exchange Rate Configuration

Home currency, sources and fallback table for currency conversion.

The upstream API quotes every currency against the home currency
("1 INR = X USD"); rates are stored inverted ("1 USD = 1/X INR").

Update frequency: daily (upstream publishes once per day)
Source: https://github.com/fawazahmed0/exchange-api
"""

from datetime import timedelta

HOME_CURRENCY = "INR"

CACHE_TTL = timedelta(hours=24)
REQUEST_TIMEOUT_SECONDS = 10

PRIMARY_URL = "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1/currencies/inr.json"
SECONDARY_URL = "https://latest.currency-api.pages.dev/v1/currencies/inr.json"

# Units of home currency per 1 unit of foreign currency
FALLBACK_RATES = {
    "INR": 1.0,
    "USD": 83.0,
    "EUR": 90.0,
    "GBP": 105.0,
    "JPY": 0.55,
    "AUD": 54.0,
    "CAD": 61.0,
    "CHF": 94.0,
    "CNY": 11.5,
    "SGD": 62.0,
}

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "Fr",
    "CNY": "¥",
    "SGD": "S$",
}
