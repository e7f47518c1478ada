"""Provider directory schemas with Pydantic validation."""
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

SortKey = Literal["relevance", "distance", "availability", "rating"]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire. Accepts either on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================
# Provider records
# ============================================


class OfficeAddress(CamelModel):
    model_config = ConfigDict(frozen=True)

    street: str
    city: str
    state: str
    zip_code: str
    latitude: float | None = None
    longitude: float | None = None

    def formatted(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"


class Education(CamelModel):
    model_config = ConfigDict(frozen=True)

    degree: str
    institution: str
    graduation_year: str


class Certification(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    organization: str
    year: str | None = None


class ProviderCreate(CamelModel):
    """Insert shape for a provider (everything but the id)."""

    name: Annotated[str, Field(min_length=1)]
    title: str
    specialty: Annotated[str, Field(min_length=1)]
    profile_image: str | None = None
    facility_name: str
    distance: float | None = None
    rating: Annotated[float, Field(ge=0, le=5)]
    review_count: Annotated[int, Field(ge=0)]
    next_available: str | None = None
    insurances: tuple[str, ...] = ()
    is_in_network: bool = True
    has_virtual_visits: bool = False
    languages: tuple[str, ...] = ()
    about: str
    education: tuple[Education, ...] = ()
    certifications: tuple[Certification, ...] = ()
    office_address: OfficeAddress
    office_phone: str
    office_hours: dict[str, str] = Field(default_factory=dict)
    accepting_new_patients: bool = True
    is_spanish_speaking: bool = False


class Provider(ProviderCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class Specialty(CamelModel):
    id: int
    name: str


class InsurancePlan(CamelModel):
    id: int
    name: str


# ============================================
# Search request / response
# ============================================


class AvailabilityFilter(CamelModel):
    today: StrictBool = False
    this_week: StrictBool = False
    weekends: StrictBool = False


class AdditionalFilter(CamelModel):
    accepting_new_patients: StrictBool = False
    virtual_visits: StrictBool = False
    spanish_speaking: StrictBool = False


class ProviderFilter(CamelModel):
    search_query: StrictStr | None = None
    specialty: StrictStr | None = None
    zip_code: StrictStr | None = None
    radius: StrictStr | None = None
    insurance: StrictStr | None = None
    availability: AvailabilityFilter | None = None
    additional: AdditionalFilter | None = None
    page: Annotated[StrictInt, Field(ge=1, description="1-based page number")] = 1
    limit: Annotated[StrictInt, Field(gt=0, description="Page size")] = 10
    sort: SortKey = "relevance"


class ProviderPage(CamelModel):
    providers: list[Provider]
    total: int
    location: str | None = None


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    message: str
    errors: list[FieldError] | None = None


def field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten a ValidationError into dotted-path field messages."""
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "body"
        errors.append(FieldError(field=loc, message=err["msg"]))
    return errors
