"""SQLAlchemy models for motorsport entities."""

import uuid
from enum import Enum as PyEnum

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Integer,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.database import Base

ID_LENGTH = 36


def new_id() -> str:
    """Return a fresh UUID4 identifier in its 36-character string form."""
    return str(uuid.uuid4())


def _id_column() -> Mapped[str]:
    return mapped_column(String(ID_LENGTH), primary_key=True, default=new_id)


class Nationality(str, PyEnum):
    """Nationalities accepted for drivers and teams."""

    USA = "USA"
    VIET_NAM = "Viet Nam"


def _nationality_column() -> Mapped[Nationality]:
    return mapped_column(
        Enum(
            Nationality,
            name="nationality",
            native_enum=False,
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )


# Owned by Team. Rows go away with either side, drivers and teams never do.
team_drivers = Table(
    "team_drivers",
    Base.metadata,
    Column(
        "team_id",
        String(ID_LENGTH),
        ForeignKey("teams.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "driver_id",
        String(ID_LENGTH),
        ForeignKey("drivers.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Address(Base):
    """Postal address referenced by drivers and teams."""

    __tablename__ = "addresses"

    id: Mapped[str] = _id_column()
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str] = mapped_column(String(255), nullable=False)
    zipcode: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False)


class RaceClass(Base):
    """Competition category, e.g. "LM GTE AM"."""

    __tablename__ = "classes"

    id: Mapped[str] = _id_column()
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class Car(Base):
    __tablename__ = "cars"

    id: Mapped[str] = _id_column()
    make: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    class_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("classes.id"), nullable=False
    )
    team_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("teams.id"), nullable=False
    )

    class_: Mapped["RaceClass"] = relationship()
    team: Mapped["Team"] = relationship(back_populates="cars")
    race_results: Mapped[list["RaceResult"]] = relationship(back_populates="car")


class Driver(Base):
    __tablename__ = "drivers"

    id: Mapped[str] = _id_column()
    first_name: Mapped[str] = mapped_column(String(40), nullable=False)
    last_name: Mapped[str] = mapped_column(String(40), nullable=False)
    nationality: Mapped[Nationality] = _nationality_column()
    home_address_id: Mapped[str | None] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    management_address_id: Mapped[str | None] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )

    home_address: Mapped[Address | None] = relationship(
        foreign_keys=[home_address_id]
    )
    management_address: Mapped[Address | None] = relationship(
        foreign_keys=[management_address_id]
    )
    # Read side of the association; Team.drivers owns writes.
    teams: Mapped[list["Team"]] = relationship(
        secondary=team_drivers,
        viewonly=True,
    )
    race_results: Mapped[list["RaceResult"]] = relationship(back_populates="driver")


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[str] = _id_column()
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    nationality: Mapped[Nationality] = _nationality_column()
    business_address_id: Mapped[str | None] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )

    business_address: Mapped[Address | None] = relationship()
    drivers: Mapped[list["Driver"]] = relationship(
        secondary=team_drivers,
        passive_deletes=True,
    )
    cars: Mapped[list["Car"]] = relationship(back_populates="team")


class Race(Base):
    """A named event. Results are queried separately, never joined eagerly."""

    __tablename__ = "races"

    id: Mapped[str] = _id_column()
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    race_results: Mapped[list["RaceResult"]] = relationship(back_populates="race")


class RaceResult(Base):
    """One driver's entry in one race with one car.

    A missing finish_position means the entry has not finished (DNF or
    race still running), which is not the same as a finishing position of 0.
    """

    __tablename__ = "race_results"
    __table_args__ = (
        UniqueConstraint(
            "car_id", "race_id", "driver_id", name="uq_race_results_car_race_driver"
        ),
    )

    id: Mapped[str] = _id_column()
    car_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("cars.id"), nullable=False
    )
    race_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("races.id"), nullable=False, index=True
    )
    driver_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("drivers.id"), nullable=False, index=True
    )
    class_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("classes.id"), nullable=False
    )
    race_number: Mapped[str] = mapped_column(String(255), nullable=False)
    start_position: Mapped[int] = mapped_column(Integer, nullable=False)
    finish_position: Mapped[int | None] = mapped_column(Integer, nullable=True)

    car: Mapped["Car"] = relationship(back_populates="race_results")
    race: Mapped["Race"] = relationship(back_populates="race_results")
    driver: Mapped["Driver"] = relationship(back_populates="race_results")
    class_: Mapped["RaceClass"] = relationship()
