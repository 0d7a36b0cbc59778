"""Unit tests for repositories.relations."""

import pytest

from models import Car, RaceResult, Team
from repositories.relations import (
    CAR_RELATIONS,
    RACE_RELATIONS,
    RACE_RESULT_RELATIONS,
    TEAM_RELATIONS,
    loader_options,
)


@pytest.mark.unit
class TestLoaderOptions:
    def test_one_option_per_path(self):
        assert len(loader_options(Car, CAR_RELATIONS)) == len(CAR_RELATIONS)

    def test_empty_policy_has_no_options(self):
        assert loader_options(Car, ()) == []

    def test_every_declared_path_resolves(self):
        loader_options(Team, TEAM_RELATIONS)
        loader_options(RaceResult, RACE_RESULT_RELATIONS)

    def test_column_segment_is_rejected(self):
        with pytest.raises(AttributeError, match="not a relationship"):
            loader_options(Car, ("team.name",))

    def test_unknown_segment_is_rejected(self):
        with pytest.raises(AttributeError):
            loader_options(Car, ("pit_crew",))


@pytest.mark.unit
def test_race_results_are_not_eager_loaded_with_race():
    assert "race_results" not in RACE_RELATIONS
