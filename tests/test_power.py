"""Unit tests for the power index."""

import pytest

from league_analyzer.models import TeamDraftScore
from league_analyzer.power import power_for, power_from_total, power_index


def graded(roster_id, total):
    return TeamDraftScore(
        roster_id=roster_id,
        owner=f'Team {roster_id}',
        top_heavy_score=0.0,
        balance_score=0.0,
        depth_score=0.0,
        volatility_score=0.0,
        total=total,
    )


class TestPowerIndex:
    """Tests for power derivation from draft totals."""

    def test_average_team_is_50(self):
        assert power_from_total(75) == pytest.approx(50.0)

    def test_best_team(self):
        assert power_from_total(100) == pytest.approx(81.25)

    def test_not_clamped(self):
        """Weak drafts go well below zero."""
        assert power_from_total(0) == pytest.approx(-43.75)

    def test_strictly_increasing(self):
        totals = [10.0, 52.0, 74.9, 75.0, 91.99, 100.0]
        powers = [power_from_total(t) for t in totals]
        assert all(a < b for a, b in zip(powers, powers[1:]))

    def test_mapping_by_roster(self):
        power = power_index([graded(3, 75.0), graded(1, 100.0)])
        assert power == {3: pytest.approx(50.0), 1: pytest.approx(81.25)}

    def test_empty(self):
        assert power_index([]) == {}

    def test_missing_team_defaults_to_50(self):
        assert power_for(9, {1: 81.25}) == 50.0
        assert power_for(1, {1: 81.25}) == 81.25
