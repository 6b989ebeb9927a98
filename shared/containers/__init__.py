"""
Container Planning

Volume and container-count calculations for sea shipments.
"""

from .planner import (
    ContainerRequirement,
    add_container_requirements,
    add_volume,
    plan_containers,
)
from .reference import (
    CONTAINER_20FT_CAPACITY_CBM,
    CONTAINER_40FT_CAPACITY_CBM,
    EXCEEDS_20FT,
    EXCEEDS_CONTAINER,
)

__all__ = [
    "ContainerRequirement",
    "add_container_requirements",
    "add_volume",
    "plan_containers",
    "CONTAINER_20FT_CAPACITY_CBM",
    "CONTAINER_40FT_CAPACITY_CBM",
    "EXCEEDS_20FT",
    "EXCEEDS_CONTAINER",
]
