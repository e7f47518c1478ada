"""Insurance plan fixtures."""

INSURANCE_PLANS = [
    "Aetna",
    "Blue Cross Blue Shield",
    "Cigna",
    "Humana",
    "Medicaid",
    "Medicare",
    "UnitedHealthcare",
    "Oscar",
    "Kaiser Permanente",
    "Anthem",
]


def is_known_plan(name: str) -> bool:
    """Check a plan name against the seed vocabulary (case-insensitive)."""
    name_lower = name.lower().strip()
    return any(plan.lower() == name_lower for plan in INSURANCE_PLANS)
