"""Pydantic schemas for API request/response validation."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from models import ID_LENGTH, Nationality

EntityId = Annotated[str, Field(min_length=ID_LENGTH, max_length=ID_LENGTH)]
# Free-text columns are String(255)
TEXT_LENGTH = 255
RequiredText = Annotated[str, Field(min_length=1, max_length=TEXT_LENGTH)]
OptionalText = Annotated[str, Field(max_length=TEXT_LENGTH)]


# =============================================================================
# Request payloads
# =============================================================================


class AddressPayload(BaseModel):
    """Address create/update payload. Street lines are optional."""

    street: OptionalText | None = None
    street2: OptionalText | None = None
    city: RequiredText
    state: RequiredText
    zipcode: RequiredText
    country: RequiredText


class ClassPayload(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class CarPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    make: RequiredText
    model: RequiredText
    class_: EntityId = Field(alias="class")
    team: EntityId


class CarQuery(BaseModel):
    """Substring filters for listing cars; blank values are ignored."""

    make: str | None = None
    model: str | None = None


class DriverPayload(BaseModel):
    first_name: str = Field(min_length=1, max_length=40)
    last_name: str = Field(min_length=1, max_length=40)
    nationality: Nationality
    home_address: EntityId | None = None
    management_address: EntityId | None = None


class TeamPayload(BaseModel):
    """Team create/update payload.

    ``drivers`` holds driver ids; they are resolved to existing drivers before
    the team is saved and unknown ids are dropped.
    """

    name: str = Field(min_length=1, max_length=100)
    nationality: Nationality
    business_address: EntityId | None = None
    drivers: list[EntityId] | None = None


class RaceResultPayload(BaseModel):
    """A race result as submitted with (or for) a race.

    ``finish_position`` is None while the entry has not finished.
    """

    model_config = ConfigDict(populate_by_name=True)

    car: EntityId
    driver: EntityId
    class_: EntityId = Field(alias="class")
    race_number: RequiredText
    start_position: int
    finish_position: int | None = None


class RacePayload(BaseModel):
    name: RequiredText


class RaceCreatePayload(RacePayload):
    race_results: list[RaceResultPayload] | None = None


class RaceResultsBatch(BaseModel):
    race_results: list[RaceResultPayload] = Field(default_factory=list)


# =============================================================================
# Responses
# =============================================================================


class CreatedResponse(BaseModel):
    """Identifier assigned to a newly created entity."""

    id: str


class AddressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    street: str | None = None
    street2: str | None = None
    city: str
    state: str
    zipcode: str
    country: str


class ClassResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class TeamSummary(BaseModel):
    """Team as nested under a car or driver."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    nationality: Nationality
    business_address: AddressResponse | None = None


class CarSummary(BaseModel):
    """Car as nested under a team or race result."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    make: str
    model: str
    class_: ClassResponse = Field(serialization_alias="class")


class CarResponse(CarSummary):
    team: TeamSummary


class DriverSummary(BaseModel):
    """Driver as nested under a team or race result."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    nationality: Nationality
    home_address: AddressResponse | None = None
    management_address: AddressResponse | None = None


class DriverResponse(DriverSummary):
    teams: list[TeamSummary] = Field(default_factory=list)


class TeamResponse(TeamSummary):
    cars: list[CarSummary] = Field(default_factory=list)
    drivers: list[DriverSummary] = Field(default_factory=list)


class RaceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class RaceResultResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    race: RaceResponse
    car: CarSummary
    driver: DriverSummary
    class_: ClassResponse = Field(serialization_alias="class")
    race_number: str
    start_position: int
    finish_position: int | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str = "paddock-api"
