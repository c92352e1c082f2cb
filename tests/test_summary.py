"""Unit tests for completed matchup summaries."""

import pytest
from conftest import make_matchup

from league_analyzer.constants import TIE
from league_analyzer.models import StarPerformer
from league_analyzer.report import format_points, summary_headline, summary_to_dict
from league_analyzer.summary import star_performer, summarize_matchups

NAMES = {1: 'Alice', 2: 'Bob'}


class TestSummaries:
    """Tests for winner, margin and star performer."""

    def test_group_seven_scenario(self):
        records = [make_matchup(7, 1, 110.25), make_matchup(7, 2, 98.40)]
        (summary,) = summarize_matchups(records, NAMES)

        assert summary.matchup_id == 7
        assert summary.winner == 'Alice'
        assert summary.margin == pytest.approx(11.85)

        payload = summary_to_dict(summary)
        assert payload['margin'] == '11.85'
        assert payload['points_a'] == '110.25'
        assert payload['points_b'] == '98.40'

    def test_side_b_wins(self):
        records = [make_matchup(1, 1, 90.0), make_matchup(1, 2, 91.5)]
        (summary,) = summarize_matchups(records, NAMES)
        assert summary.winner == 'Bob'
        assert summary.margin == pytest.approx(1.5)
        assert summary_headline(summary) == 'Bob wins by 1.50.'

    def test_tie(self):
        records = [make_matchup(1, 1, 100.0), make_matchup(1, 2, 100.0)]
        (summary,) = summarize_matchups(records, NAMES)
        assert summary.winner == TIE
        assert summary.is_tie
        assert summary.margin == 0.0
        assert summary_headline(summary) == 'Dead even, a rare draw.'

    def test_nearly_equal_is_not_a_tie(self):
        records = [make_matchup(1, 1, 100.0), make_matchup(1, 2, 100.0000001)]
        (summary,) = summarize_matchups(records, NAMES)
        assert summary.winner == 'Bob'

    def test_missing_points_count_as_zero(self):
        records = [make_matchup(1, 1, None), make_matchup(1, 2, 12.0)]
        (summary,) = summarize_matchups(records, NAMES)
        assert summary.points_a == 0.0
        assert summary.winner == 'Bob'

    def test_fallback_team_name(self):
        records = [make_matchup(1, 1, 80.0), make_matchup(1, 5, 81.0)]
        (summary,) = summarize_matchups(records, NAMES)
        assert summary.name_b == 'Team 5'
        assert summary.winner == 'Team 5'

    def test_unpaired_groups_are_skipped(self):
        records = [make_matchup(1, 1, 80.0), make_matchup(1, 2, 70.0), make_matchup(2, 3, 60.0)]
        assert [s.matchup_id for s in summarize_matchups(records, NAMES)] == [1]

    def test_margin_never_negative(self):
        records = [make_matchup(1, 1, 3.0), make_matchup(1, 2, 140.0)]
        (summary,) = summarize_matchups(records, NAMES)
        assert summary.margin >= 0
        assert format_points(summary.margin) == '137.00'


class TestStarPerformer:
    """Tests for the highest single-player score."""

    def test_highest_across_both_sides(self):
        a = make_matchup(1, 1, 50.0, {'p1': 12.0, 'p2': 8.5})
        b = make_matchup(1, 2, 40.0, {'p3': 31.2, 'p4': 2.0})
        assert star_performer([a, b]) == StarPerformer(player_id='p3', points=31.2)

    def test_equal_points_first_one_wins(self):
        a = make_matchup(1, 1, 50.0, {'p1': 20.0})
        b = make_matchup(1, 2, 40.0, {'p3': 20.0})
        assert star_performer([a, b]).player_id == 'p1'

    def test_one_side_has_breakdown(self):
        a = make_matchup(1, 1, 50.0)
        b = make_matchup(1, 2, 40.0, {'p3': 4.0})
        assert star_performer([a, b]).player_id == 'p3'

    def test_no_breakdown_is_none(self):
        records = [make_matchup(1, 1, 50.0), make_matchup(1, 2, 40.0)]
        (summary,) = summarize_matchups(records, NAMES)
        assert summary.star is None
        assert summary_to_dict(summary)['star'] is None
