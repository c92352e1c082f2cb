"""Shared fixtures and record builders."""

import pytest

from league_analyzer.schemas import DraftPick, League, Matchup, Roster, User


def make_pick(pick_no, roster_id, position='', player_id=None, round_no=None):
    """Build a DraftPick the way Sleeper sends it."""
    return DraftPick.model_validate(
        {
            'player_id': player_id or f'p{pick_no}',
            'round': round_no or (pick_no - 1) // 12 + 1,
            'pick_no': pick_no,
            'roster_id': roster_id,
            'metadata': {'position': position},
        }
    )


def make_matchup(matchup_id, roster_id, points=None, players_points=None):
    return Matchup(
        matchup_id=matchup_id,
        roster_id=roster_id,
        points=points,
        players_points=players_points or {},
    )


@pytest.fixture
def league():
    return League(league_id='L1', name='Test League', season='2025', total_rosters=4)


@pytest.fixture
def rosters():
    return [
        Roster(roster_id=1, owner_id='u1'),
        Roster(roster_id=2, owner_id='u2'),
        Roster(roster_id=3, owner_id='u3'),
        Roster(roster_id=4, owner_id=None),
    ]


@pytest.fixture
def users():
    return [
        User(user_id='u1', display_name='Alice'),
        User(user_id='u2', display_name='Bob'),
        User(user_id='u3', display_name=None),
    ]
