"""Load the seed dataset into a store."""
import structlog

from storage import ProviderStore

from .insurance import INSURANCE_PLANS, is_known_plan
from .providers import PROVIDERS, SPECIALTIES

log = structlog.get_logger()


def seed_store(store: ProviderStore) -> ProviderStore:
    """Populate vocabularies and providers. Provider ids start at 1 on a fresh store."""
    for name in SPECIALTIES:
        store.create_specialty(name)
    for name in INSURANCE_PLANS:
        store.create_insurance_plan(name)

    for data in PROVIDERS:
        unknown = [plan for plan in data.insurances if not is_known_plan(plan)]
        if unknown:
            log.warning("unknown_insurance_plan", provider=data.name, plans=unknown)
        store.create_provider(data)

    log.info(
        "store_seeded",
        providers=len(store),
        specialties=len(SPECIALTIES),
        insurance_plans=len(INSURANCE_PLANS),
    )
    return store
