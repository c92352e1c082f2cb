"""Unit tests for matchup grouping."""

from conftest import make_matchup

from league_analyzer.models import PairedMatchup, UnpairedMatchup
from league_analyzer.pairing import group_matchups, pair_matchups, split_pairings


class TestGrouping:
    """Tests for grouping records by matchup id."""

    def test_groups_ascending_by_id(self):
        records = [make_matchup(3, 5), make_matchup(1, 1), make_matchup(3, 6), make_matchup(1, 2)]
        groups = group_matchups(records)
        assert list(groups) == [1, 3]
        assert [m.roster_id for m in groups[3]] == [5, 6]

    def test_missing_id_goes_last(self):
        records = [make_matchup(None, 9), make_matchup(2, 1), make_matchup(2, 2)]
        assert list(group_matchups(records)) == [2, None]

    def test_empty(self):
        assert group_matchups([]) == {}


class TestPairing:
    """Tests for the paired/unpaired outcome."""

    def test_two_sides_pair(self):
        results = pair_matchups([make_matchup(1, 1), make_matchup(1, 2)])
        assert len(results) == 1
        assert isinstance(results[0], PairedMatchup)
        assert (results[0].a.roster_id, results[0].b.roster_id) == (1, 2)

    def test_single_side_is_unpaired(self):
        """A lone record is reported, never paired with itself."""
        results = pair_matchups([make_matchup(4, 7)])
        assert results == [UnpairedMatchup(matchup_id=4, sides=[make_matchup(4, 7)])]

    def test_three_sides_unpaired(self):
        records = [make_matchup(1, 1), make_matchup(1, 2), make_matchup(1, 3)]
        (result,) = pair_matchups(records)
        assert isinstance(result, UnpairedMatchup)
        assert len(result.sides) == 3

    def test_each_record_without_id_is_unpaired(self):
        results = pair_matchups([make_matchup(None, 1), make_matchup(None, 2)])
        assert [r.sides[0].roster_id for r in results] == [1, 2]
        assert all(r.matchup_id is None for r in results)

    def test_split(self):
        records = [make_matchup(1, 1), make_matchup(1, 2), make_matchup(2, 3)]
        paired, unpaired = split_pairings(pair_matchups(records))
        assert [p.matchup_id for p in paired] == [1]
        assert [u.matchup_id for u in unpaired] == [2]
