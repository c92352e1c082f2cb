"""Integrity checks for fetched records and grading configuration."""

import math
from collections import Counter
from typing import Iterable

from .pairing import group_matchups
from .schemas import DraftConfig, DraftPick, Matchup, Roster


def validate_draft_picks(picks: Iterable[DraftPick], rosters: Iterable[Roster]) -> list[str]:
    """
    Validate a draft's pick list against the league's rosters.

    Checks:
    - Overall pick numbers are unique
    - Every pick belongs to a roster in the league

    Args:
        picks: Draft picks
        rosters: League rosters

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    picks = list(picks)

    counts = Counter(p.pick_no for p in picks)
    duplicates = sorted(pick_no for pick_no, n in counts.items() if n > 1)
    if duplicates:
        errors.append(f'Duplicate overall pick numbers: {", ".join(str(n) for n in duplicates)}')

    roster_ids = {r.roster_id for r in rosters}
    if roster_ids:
        unknown = sorted({p.roster_id for p in picks} - roster_ids)
        for roster_id in unknown:
            errors.append(f'Picks made by roster {roster_id}, which is not in the league')

    return errors


def validate_matchups(matchups: Iterable[Matchup], rosters: Iterable[Roster]) -> list[str]:
    """
    Validate one week's matchup records.

    Checks:
    - Every matchup group has exactly two sides
    - Every record belongs to a roster in the league

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    matchups = list(matchups)

    for mid, sides in group_matchups(matchups).items():
        if mid is None:
            teams = ', '.join(str(m.roster_id) for m in sides)
            errors.append(f'Records without a matchup id for roster(s) {teams}')
        elif len(sides) != 2:
            errors.append(f'Matchup {mid} has {len(sides)} sides (expected 2)')

    roster_ids = {r.roster_id for r in rosters}
    if roster_ids:
        for roster_id in sorted({m.roster_id for m in matchups} - roster_ids):
            errors.append(f'Matchup record for roster {roster_id}, which is not in the league')

    return errors


def validate_draft_config(config: DraftConfig) -> list[str]:
    """
    Sanity-check a grading configuration.

    Checks:
    - Scoring weights sum to 1.0
    - Every ideal-depth position has an explicit multiplier

    Returns:
        List of warning messages (empty if the config looks sane)
    """
    warnings = []
    w = config.weights
    total = w.top_heavy + w.balance + w.depth + w.volatility
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        warnings.append(f'Scoring weights sum to {total:.3f} (expected 1.0)')

    missing = sorted(set(config.ideal_depth) - set(config.position_values))
    if missing:
        warnings.append(f'No position multiplier for {", ".join(missing)} (defaults to 1.0)')

    return warnings
