"""Tests for request and record schemas."""
import pytest
from pydantic import ValidationError

from schemas import OfficeAddress, Provider, ProviderFilter, field_errors


class TestProviderFilter:
    """Tests for ProviderFilter validation."""

    def test_defaults(self):
        """Test an empty payload gets paging and sort defaults."""
        f = ProviderFilter.model_validate({})

        assert f.page == 1
        assert f.limit == 10
        assert f.sort == "relevance"
        assert f.search_query is None
        assert f.availability is None

    def test_accepts_camel_case_payload(self):
        """Test wire-format keys map onto snake_case fields."""
        f = ProviderFilter.model_validate({
            "searchQuery": "cardio",
            "zipCode": "10001",
            "availability": {"thisWeek": True},
            "additional": {"acceptingNewPatients": True, "spanishSpeaking": True},
        })

        assert f.search_query == "cardio"
        assert f.zip_code == "10001"
        assert f.availability.this_week is True
        assert f.availability.today is False
        assert f.additional.accepting_new_patients is True
        assert f.additional.virtual_visits is False

    def test_accepts_snake_case_kwargs(self):
        """Test Python callers can use field names."""
        f = ProviderFilter(search_query="skin", sort="rating")
        assert f.search_query == "skin"
        assert f.sort == "rating"

    @pytest.mark.parametrize("payload", [
        {"page": 0},
        {"page": -3},
        {"limit": 0},
        {"sort": "alphabetical"},
        {"availability": {"today": "sometimes"}},
        {"page": "2"},
        {"page": True},
        {"page": 1.5},
        {"limit": "3"},
        {"availability": {"today": "yes"}},
        {"additional": {"spanishSpeaking": "on"}},
        {"additional": {"virtualVisits": 1}},
        {"specialty": 7},
    ])
    def test_rejects_invalid_values(self, payload):
        """Test invalid or wrongly-typed values fail validation instead of coercing."""
        with pytest.raises(ValidationError):
            ProviderFilter.model_validate(payload)

    def test_field_errors_use_wire_names(self):
        """Test flattened errors name the camelCase field."""
        with pytest.raises(ValidationError) as exc_info:
            ProviderFilter.model_validate({"searchQuery": 5, "page": 0})

        fields = {err.field for err in field_errors(exc_info.value)}
        assert fields == {"searchQuery", "page"}

    def test_nested_field_errors_are_dotted(self):
        """Test nested flag errors use a dotted path."""
        with pytest.raises(ValidationError) as exc_info:
            ProviderFilter.model_validate({"additional": {"virtualVisits": 1}})

        assert [err.field for err in field_errors(exc_info.value)] == ["additional.virtualVisits"]


class TestProvider:
    """Tests for Provider records."""

    def test_serializes_with_camel_case_keys(self, make_provider):
        """Test JSON output uses camelCase keys."""
        provider = Provider(id=7, **make_provider(next_available="Today, 9:00 AM").model_dump())
        data = provider.model_dump(by_alias=True)

        assert data["id"] == 7
        assert data["reviewCount"] == 10
        assert data["nextAvailable"] == "Today, 9:00 AM"
        assert data["officeAddress"]["zipCode"] == "62701"
        assert data["isInNetwork"] is True

    def test_sequences_serialize_as_json_lists(self, make_provider):
        """Test tuple fields come out as JSON arrays."""
        provider = Provider(id=1, **make_provider(insurances=["Aetna", "Cigna"]).model_dump())

        assert provider.insurances == ("Aetna", "Cigna")
        assert '"insurances":["Aetna","Cigna"]' in provider.model_dump_json(by_alias=True)

    def test_is_immutable(self, make_provider):
        """Test providers cannot be modified after creation."""
        provider = Provider(id=1, **make_provider(languages=["English"]).model_dump())

        with pytest.raises(ValidationError):
            provider.name = "Someone Else"
        with pytest.raises(ValidationError):
            provider.office_address.city = "Elsewhere"
        with pytest.raises(AttributeError):
            provider.languages.append("Spanish")

    def test_rating_out_of_range_rejected(self, make_provider):
        """Test rating must be within 0-5."""
        with pytest.raises(ValidationError):
            make_provider(rating=6.2)

    def test_formatted_address(self):
        """Test office address formatting."""
        address = OfficeAddress(street="123 Park Avenue", city="New York", state="NY", zip_code="10022")
        assert address.formatted() == "123 Park Avenue, New York, NY 10022"
