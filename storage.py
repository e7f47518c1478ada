"""Provider storage (in-memory)."""
import itertools
import math

import structlog

from availability import (
    availability_rank,
    is_available_this_week,
    is_available_today,
    is_available_weekends,
)
from schemas import (
    InsurancePlan,
    Provider,
    ProviderCreate,
    ProviderFilter,
    ProviderPage,
    Specialty,
)

log = structlog.get_logger()

DEFAULT_LOCATION = "New York, NY"


def relevance_score(provider: Provider) -> float:
    """Popularity-weighted rating: rating * ln(review_count + 1)."""
    return provider.rating * math.log(provider.review_count + 1)


def sort_providers(providers: list[Provider], sort: str) -> list[Provider]:
    """Return a sorted copy. Ties keep input order."""
    if sort == "distance":
        return sorted(providers, key=lambda p: p.distance or 0)
    if sort == "rating":
        return sorted(providers, key=lambda p: p.rating, reverse=True)
    if sort == "availability":
        return sorted(providers, key=lambda p: availability_rank(p.next_available))
    return sorted(providers, key=relevance_score, reverse=True)


def paginate(providers: list[Provider], page: int, limit: int) -> list[Provider]:
    start = (page - 1) * limit
    return providers[start:start + limit]


def detach(provider: Provider) -> Provider:
    """Copy handed to callers. office_hours is the only mutable container on a record."""
    return provider.model_copy(update={"office_hours": dict(provider.office_hours)})


def matches_query(provider: Provider, query: str) -> bool:
    query = query.lower()
    return (
        query in provider.name.lower()
        or query in provider.specialty.lower()
        or query in provider.office_address.formatted().lower()
        or query in provider.about.lower()
        or any(query in name.lower() for name in provider.insurances)
    )


class ProviderStore:
    """Holds providers, specialties and insurance plans for one process."""

    def __init__(self, default_location: str = DEFAULT_LOCATION):
        self.default_location = default_location
        self._providers: dict[int, Provider] = {}
        self._specialties: dict[str, Specialty] = {}
        self._insurance_plans: dict[str, InsurancePlan] = {}
        self._provider_ids = itertools.count(1)
        self._specialty_ids = itertools.count(1)
        self._insurance_plan_ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._providers)

    # Providers

    def get_providers(self, page: int = 1, limit: int = 10, sort: str = "relevance") -> ProviderPage:
        providers = list(self._providers.values())
        ordered = sort_providers(providers, sort)
        return ProviderPage(
            providers=[detach(p) for p in paginate(ordered, page, limit)],
            total=len(providers),
            location=self.default_location,
        )

    def get_provider(self, provider_id: int) -> Provider | None:
        provider = self._providers.get(provider_id)
        return detach(provider) if provider else None

    def create_provider(self, data: ProviderCreate) -> Provider:
        provider_id = next(self._provider_ids)
        provider = Provider(id=provider_id, **data.model_dump())
        self._providers[provider_id] = provider
        log.debug("provider_created", provider_id=provider_id, specialty=provider.specialty)
        return detach(provider)

    def search_providers(self, filter: ProviderFilter) -> ProviderPage:
        """Filter, sort and paginate providers.

        Predicates narrow the set in a fixed order: free-text query,
        specialty, insurance, availability, then the additional flags.
        """
        results = list(self._providers.values())

        if filter.search_query:
            results = [p for p in results if matches_query(p, filter.search_query)]

        if filter.specialty:
            specialty = filter.specialty.lower()
            results = [p for p in results if p.specialty.lower() == specialty]

        if filter.insurance:
            insurance = filter.insurance.lower()
            results = [p for p in results if any(i.lower() == insurance for i in p.insurances)]

        if filter.availability:
            if filter.availability.today:
                results = [p for p in results if is_available_today(p.next_available)]
            if filter.availability.this_week:
                results = [p for p in results if is_available_this_week(p.next_available)]
            if filter.availability.weekends:
                results = [p for p in results if is_available_weekends(p.next_available)]

        if filter.additional:
            if filter.additional.accepting_new_patients:
                results = [p for p in results if p.accepting_new_patients]
            if filter.additional.virtual_visits:
                results = [p for p in results if p.has_virtual_visits]
            if filter.additional.spanish_speaking:
                results = [p for p in results if any(l.lower() == "spanish" for l in p.languages)]

        ordered = sort_providers(results, filter.sort)
        location = f"Area near {filter.zip_code}" if filter.zip_code else self.default_location

        log.info(
            "search_providers",
            total=len(results),
            page=filter.page,
            limit=filter.limit,
            sort=filter.sort,
        )
        return ProviderPage(
            providers=[detach(p) for p in paginate(ordered, filter.page, filter.limit)],
            total=len(results),
            location=location,
        )

    # Specialties

    def get_specialties(self) -> list[str]:
        return list(self._specialties)

    def create_specialty(self, name: str) -> Specialty:
        """Add a specialty (deduplicated by name)."""
        existing = self._specialties.get(name)
        if existing:
            return existing
        specialty = Specialty(id=next(self._specialty_ids), name=name)
        self._specialties[name] = specialty
        return specialty

    # Insurance plans

    def get_insurance_plans(self) -> list[str]:
        return list(self._insurance_plans)

    def create_insurance_plan(self, name: str) -> InsurancePlan:
        """Add an insurance plan (deduplicated by name)."""
        existing = self._insurance_plans.get(name)
        if existing:
            return existing
        plan = InsurancePlan(id=next(self._insurance_plan_ids), name=name)
        self._insurance_plans[name] = plan
        return plan
