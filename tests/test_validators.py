"""Unit tests for validation functions."""

from conftest import make_matchup, make_pick

from league_analyzer.schemas import DraftConfig, ScoringWeights
from league_analyzer.validators import (
    validate_draft_config,
    validate_draft_picks,
    validate_matchups,
)


class TestDraftPickValidation:
    """Tests for draft pick validation."""

    def test_valid_draft(self, rosters):
        picks = [make_pick(1, 1), make_pick(2, 2), make_pick(3, 3)]
        assert validate_draft_picks(picks, rosters) == []

    def test_duplicate_pick_numbers(self, rosters):
        picks = [make_pick(1, 1), make_pick(1, 2), make_pick(5, 3), make_pick(5, 4)]
        errors = validate_draft_picks(picks, rosters)
        assert errors == ['Duplicate overall pick numbers: 1, 5']

    def test_unknown_roster(self, rosters):
        errors = validate_draft_picks([make_pick(1, 12)], rosters)
        assert errors == ['Picks made by roster 12, which is not in the league']

    def test_no_rosters_skips_membership_check(self):
        assert validate_draft_picks([make_pick(1, 12)], []) == []


class TestMatchupValidation:
    """Tests for weekly matchup validation."""

    def test_valid_week(self, rosters):
        records = [make_matchup(1, 1), make_matchup(1, 2), make_matchup(2, 3), make_matchup(2, 4)]
        assert validate_matchups(records, rosters) == []

    def test_odd_group(self, rosters):
        records = [make_matchup(1, 1), make_matchup(1, 2), make_matchup(2, 3)]
        assert validate_matchups(records, rosters) == ['Matchup 2 has 1 sides (expected 2)']

    def test_missing_matchup_id(self, rosters):
        records = [make_matchup(None, 3), make_matchup(None, 4)]
        errors = validate_matchups(records, rosters)
        assert errors == ['Records without a matchup id for roster(s) 3, 4']

    def test_unknown_roster(self, rosters):
        records = [make_matchup(1, 1), make_matchup(1, 99)]
        errors = validate_matchups(records, rosters)
        assert errors == ['Matchup record for roster 99, which is not in the league']


class TestDraftConfigValidation:
    """Tests for grading configuration warnings."""

    def test_default_config_is_clean(self):
        assert validate_draft_config(DraftConfig()) == []

    def test_weights_not_summing_to_one(self):
        config = DraftConfig(weights=ScoringWeights(top_heavy=0.5, balance=0.5, depth=0.5, volatility=0))
        assert validate_draft_config(config) == ['Scoring weights sum to 1.500 (expected 1.0)']

    def test_missing_multiplier(self):
        config = DraftConfig(position_values={'QB': 1.0, 'RB': 1.0, 'WR': 1.0, 'TE': 1.0})
        warnings = validate_draft_config(config)
        assert warnings == ['No position multiplier for DEF, K (defaults to 1.0)']
