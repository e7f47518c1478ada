"""Tests for fixture data."""
from fixtures import (
    INSURANCE_PLANS,
    PROVIDERS,
    SPECIALTIES,
    is_known_plan,
    seed_store,
)
from storage import ProviderStore


class TestProviders:
    """Tests for provider seed data."""

    def test_providers_exist(self):
        """Test seed providers are defined."""
        assert len(PROVIDERS) == 5

    def test_provider_has_required_fields(self):
        """Test each seed provider has card and detail fields."""
        for provider in PROVIDERS:
            assert provider.name
            assert provider.specialty
            assert provider.office_address.zip_code
            assert provider.office_hours
            assert provider.education

    def test_seed_specialties_are_in_vocabulary(self):
        """Test every seed specialty is in the specialty list."""
        assert all(p.specialty in SPECIALTIES for p in PROVIDERS)

    def test_seed_insurances_are_known(self):
        """Test every seed insurance is a known plan."""
        for provider in PROVIDERS:
            assert all(is_known_plan(plan) for plan in provider.insurances)


class TestInsurance:
    """Tests for insurance vocabulary."""

    def test_plans_are_unique(self):
        """Test insurance plan names are unique."""
        assert len(INSURANCE_PLANS) == len(set(INSURANCE_PLANS))

    def test_is_known_plan_case_insensitive(self):
        """Test plan lookup ignores case and whitespace."""
        assert is_known_plan("blue cross blue shield")
        assert is_known_plan("  Aetna ")
        assert not is_known_plan("Acme Health")


class TestSeedStore:
    """Tests for seeding a store."""

    def test_seeds_providers_in_order(self):
        """Test providers get ids 1..N in seed order."""
        store = seed_store(ProviderStore())

        assert len(store) == len(PROVIDERS)
        assert store.get_provider(1).name == "Dr. Sarah Johnson"
        assert store.get_provider(5).name == "Dr. Robert Williams"

    def test_seeds_vocabularies(self):
        """Test specialty and plan lists are loaded."""
        store = seed_store(ProviderStore())

        assert store.get_specialties() == SPECIALTIES
        assert store.get_insurance_plans() == INSURANCE_PLANS
