from .providers import (
    PROVIDERS,
    SPECIALTIES,
    WEEKDAY_HOURS,
)
from .insurance import (
    INSURANCE_PLANS,
    is_known_plan,
)
from .seed import seed_store

__all__ = [
    "PROVIDERS",
    "SPECIALTIES",
    "WEEKDAY_HOURS",
    "INSURANCE_PLANS",
    "is_known_plan",
    "seed_store",
]
