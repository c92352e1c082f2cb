"""Weekly matchup previews and Game of the Week."""

import logging
from typing import Callable, Iterable, Mapping

from .constants import SLIGHT_FAVORITE, TOSS_UP
from .models import Forecast, Preview
from .pairing import pair_matchups, split_pairings
from .power import power_for
from .schemas import Matchup

logger = logging.getLogger('league_analyzer.forecast')


def preview_matchups(matchups: Iterable[Matchup], power: Mapping[int, float]) -> Forecast:
    """
    Build a Preview per two-team game, closest game first.

    Games are built in ascending matchup id order and then stably sorted by
    power diff, so ties at the minimum go to the lowest matchup id. Groups
    that are not two-team games are listed in Forecast.unpaired.

    Args:
        matchups: One week's matchup records
        power: Roster id -> power index (missing teams default to 50)

    Returns:
        Forecast; forecast.game_of_the_week is the first preview, or None
    """
    paired, unpaired = split_pairings(pair_matchups(matchups))

    previews = []
    for game in paired:
        power_a = power_for(game.a.roster_id, power)
        power_b = power_for(game.b.roster_id, power)
        previews.append(
            Preview(
                matchup_id=game.matchup_id,
                team_a=game.a.roster_id,
                team_b=game.b.roster_id,
                power_a=power_a,
                power_b=power_b,
                diff=abs(power_a - power_b),
            )
        )
    previews.sort(key=lambda p: p.diff)

    if unpaired:
        logger.debug(f'{len(unpaired)} matchup group(s) skipped in previews')
    return Forecast(previews=previews, unpaired=unpaired)


def favorite_label(preview: Preview, name_for: Callable[[int], str]) -> str:
    """'Toss-up' for equal power, otherwise '<name> slight favorite'."""
    favorite = preview.favorite
    if favorite is None:
        return TOSS_UP
    return f'{name_for(favorite)} {SLIGHT_FAVORITE}'
