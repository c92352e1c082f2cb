"""Summaries of completed matchups."""

from typing import Iterable, List, Mapping, Optional

from .constants import TIE
from .lookup import display_name
from .models import StarPerformer, Summary
from .pairing import pair_matchups, split_pairings
from .schemas import Matchup


def star_performer(sides: Iterable[Matchup]) -> Optional[StarPerformer]:
    """
    Highest single-player score across both sides.

    Candidates are taken side by side in order; on equal points the first
    one wins. None when neither side has a per-player breakdown.
    """
    entries = [item for side in sides for item in side.players_points.items()]
    if not entries:
        return None
    player_id, points = sorted(entries, key=lambda kv: kv[1], reverse=True)[0]
    return StarPerformer(player_id=player_id, points=points)


def summarize_matchups(matchups: Iterable[Matchup], names: Mapping[int, str]) -> List[Summary]:
    """
    Summarize every two-team game in a week.

    Missing points count as 0. The winner is the side with more points,
    by owner display name, or TIE when the points are exactly equal.

    Args:
        matchups: One week's matchup records, with points once scored
        names: Roster id -> owner display name (see lookup.build_owner_names)

    Returns:
        One Summary per two-team game, ascending matchup id
    """
    paired, _unpaired = split_pairings(pair_matchups(matchups))

    summaries = []
    for game in paired:
        name_a = display_name(game.a.roster_id, names)
        name_b = display_name(game.b.roster_id, names)
        points_a = game.a.points or 0.0
        points_b = game.b.points or 0.0
        if points_a == points_b:
            winner = TIE
        else:
            winner = name_a if points_a > points_b else name_b
        summaries.append(
            Summary(
                matchup_id=game.matchup_id,
                team_a=game.a.roster_id,
                team_b=game.b.roster_id,
                name_a=name_a,
                name_b=name_b,
                points_a=points_a,
                points_b=points_b,
                winner=winner,
                margin=abs(points_a - points_b),
                star=star_performer([game.a, game.b]),
            )
        )
    return summaries
