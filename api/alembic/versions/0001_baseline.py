"""baseline motorsport schema

Revision ID: 0001_baseline
Revises:
Create Date: 2026-10-19

Addresses, classes, drivers, teams (with the team/driver association),
cars, races and race results.
"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_baseline"
down_revision = None
branch_labels = None
depends_on = None

ID = sa.String(36)
NATIONALITY = sa.Enum("USA", "Viet Nam", name="nationality", native_enum=False)


def upgrade() -> None:
    op.create_table(
        "addresses",
        sa.Column("id", ID, nullable=False),
        sa.Column("street", sa.String(255), nullable=True),
        sa.Column("street2", sa.String(255), nullable=True),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("state", sa.String(255), nullable=False),
        sa.Column("zipcode", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "classes",
        sa.Column("id", ID, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "races",
        sa.Column("id", ID, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "drivers",
        sa.Column("id", ID, nullable=False),
        sa.Column("first_name", sa.String(40), nullable=False),
        sa.Column("last_name", sa.String(40), nullable=False),
        sa.Column("nationality", NATIONALITY, nullable=False),
        sa.Column("home_address_id", ID, nullable=True),
        sa.Column("management_address_id", ID, nullable=True),
        sa.ForeignKeyConstraint(
            ["home_address_id"], ["addresses.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["management_address_id"], ["addresses.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "teams",
        sa.Column("id", ID, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("nationality", NATIONALITY, nullable=False),
        sa.Column("business_address_id", ID, nullable=True),
        sa.ForeignKeyConstraint(
            ["business_address_id"], ["addresses.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "team_drivers",
        sa.Column("team_id", ID, nullable=False),
        sa.Column("driver_id", ID, nullable=False),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["driver_id"], ["drivers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("team_id", "driver_id"),
    )

    op.create_table(
        "cars",
        sa.Column("id", ID, nullable=False),
        sa.Column("make", sa.String(255), nullable=False),
        sa.Column("model", sa.String(255), nullable=False),
        sa.Column("class_id", ID, nullable=False),
        sa.Column("team_id", ID, nullable=False),
        sa.ForeignKeyConstraint(["class_id"], ["classes.id"]),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "race_results",
        sa.Column("id", ID, nullable=False),
        sa.Column("car_id", ID, nullable=False),
        sa.Column("race_id", ID, nullable=False),
        sa.Column("driver_id", ID, nullable=False),
        sa.Column("class_id", ID, nullable=False),
        sa.Column("race_number", sa.String(255), nullable=False),
        sa.Column("start_position", sa.Integer(), nullable=False),
        sa.Column("finish_position", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["car_id"], ["cars.id"]),
        sa.ForeignKeyConstraint(["race_id"], ["races.id"]),
        sa.ForeignKeyConstraint(["driver_id"], ["drivers.id"]),
        sa.ForeignKeyConstraint(["class_id"], ["classes.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "car_id", "race_id", "driver_id", name="uq_race_results_car_race_driver"
        ),
    )
    op.create_index("ix_race_results_race_id", "race_results", ["race_id"])
    op.create_index("ix_race_results_driver_id", "race_results", ["driver_id"])


def downgrade() -> None:
    op.drop_index("ix_race_results_driver_id", table_name="race_results")
    op.drop_index("ix_race_results_race_id", table_name="race_results")
    op.drop_table("race_results")
    op.drop_table("cars")
    op.drop_table("team_drivers")
    op.drop_table("teams")
    op.drop_table("drivers")
    op.drop_table("races")
    op.drop_table("classes")
    op.drop_table("addresses")
