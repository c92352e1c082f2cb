"""Group a week's matchup records into games."""

import logging
from typing import Dict, Iterable, List, Optional

from .models import PairedMatchup, PairingResult, UnpairedMatchup
from .schemas import Matchup

logger = logging.getLogger('league_analyzer.pairing')


def group_matchups(matchups: Iterable[Matchup]) -> Dict[Optional[int], List[Matchup]]:
    """
    Group records by matchup id, ascending, records without an id last.

    Records keep their input order inside each group.
    """
    groups: Dict[Optional[int], List[Matchup]] = {}
    for m in matchups:
        groups.setdefault(m.matchup_id, []).append(m)
    ordered = sorted((mid for mid in groups if mid is not None))
    if None in groups:
        ordered.append(None)
    return {mid: groups[mid] for mid in ordered}


def pair_matchups(matchups: Iterable[Matchup]) -> List[PairingResult]:
    """
    Turn a week's records into PairedMatchup / UnpairedMatchup outcomes.

    Only a group with a matchup id and exactly two records is a game.
    Each record without a matchup id is its own unpaired outcome.
    """
    results: List[PairingResult] = []
    for mid, sides in group_matchups(matchups).items():
        if mid is None:
            results.extend(UnpairedMatchup(matchup_id=None, sides=[m]) for m in sides)
        elif len(sides) == 2:
            results.append(PairedMatchup(matchup_id=mid, a=sides[0], b=sides[1]))
        else:
            logger.debug(f'Matchup {mid} has {len(sides)} sides; not a two-team game')
            results.append(UnpairedMatchup(matchup_id=mid, sides=list(sides)))
    return results


def split_pairings(results: Iterable[PairingResult]) -> tuple[List[PairedMatchup], List[UnpairedMatchup]]:
    paired = [r for r in results if isinstance(r, PairedMatchup)]
    unpaired = [r for r in results if isinstance(r, UnpairedMatchup)]
    return paired, unpaired
