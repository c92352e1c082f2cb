"""Draft grading: sub-scores, league normalization, letter grades and tags."""

import logging
import math
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import (
    BALANCE_BASE,
    BALANCE_MAX_DIFF,
    BALANCE_SCALE,
    DEPTH_SCALE,
    FLOOR_GRADE,
    GRADE_SCALE,
    TAG_LATE_UPSIDE,
    TAG_QB_DEPTH,
    TAG_RB_CORE,
    TAG_TE_INSURANCE,
    TAG_WR_ROOM,
    TOP_HEAVY_SCALE,
    VOLATILITY_BASE,
    VOLATILITY_LATE_BONUS,
    VOLATILITY_LATE_CAP,
    VOLATILITY_SCALE,
)
from .lookup import build_owner_names, display_name
from .models import TeamDraftScore
from .schemas import DraftConfig, DraftPick, Roster, User

logger = logging.getLogger('league_analyzer.grading')


def round_value(pick_no: int, config: DraftConfig) -> float:
    """Diminishing value of an overall pick: scale / sqrt(pick_no + offset)."""
    return config.round_value_scale / math.sqrt(pick_no + config.round_value_offset)


def position_multiplier(position: str, config: DraftConfig) -> float:
    """Multiplier for a position code; unknown or blank positions get 1.0."""
    return config.position_values.get((position or '').upper(), 1.0)


def partition_picks(picks: Iterable[DraftPick]) -> Dict[int, List[DraftPick]]:
    """Group picks by roster id (ascending), each team's picks in draft order."""
    by_team: Dict[int, List[DraftPick]] = {}
    for pick in picks:
        by_team.setdefault(pick.roster_id, []).append(pick)
    return {
        roster_id: sorted(by_team[roster_id], key=lambda p: p.pick_no)
        for roster_id in sorted(by_team)
    }


def position_counts(picks: Iterable[DraftPick]) -> Counter:
    """Count drafted players per position, ignoring blank positions."""
    return Counter(p.position for p in picks if p.position)


def score_top_heavy(picks: List[DraftPick], config: DraftConfig) -> float:
    """
    Score the early-round haul.

    Sums round_value * position multiplier over picks at or before
    early_pick_max, then scales by 3.
    """
    early = [p for p in picks if p.pick_no <= config.early_pick_max]
    value = sum(round_value(p.pick_no, config) * position_multiplier(p.position, config) for p in early)
    return value * TOP_HEAVY_SCALE


def score_balance(picks: List[DraftPick], config: DraftConfig) -> float:
    """
    Score how close positional depth is to the ideal roster.

    Each ideal-depth position adds min(|have - ideal|, 3) / multiplier to a
    penalty; the score is max(0, 10 - penalty) * 8.
    """
    counts = position_counts(picks)
    penalty = 0.0
    for pos, ideal in config.ideal_depth.items():
        diff = abs(counts.get(pos, 0) - ideal)
        penalty += min(diff, BALANCE_MAX_DIFF) / position_multiplier(pos, config)
    return max(0.0, BALANCE_BASE - penalty) * BALANCE_SCALE


def score_depth(picks: List[DraftPick], config: DraftConfig) -> float:
    """
    Score bench contributors from the middle rounds.

    Picks in (bench_pick_min, bench_pick_max] add
    multiplier * 60 / sqrt(pick_no - 60 + 5); the sum is scaled by 2.5.
    """
    bench = [p for p in picks if config.bench_pick_min < p.pick_no <= config.bench_pick_max]
    value = sum(
        position_multiplier(p.position, config) * (60 / math.sqrt(p.pick_no - 60 + 5))
        for p in bench
    )
    return value * DEPTH_SCALE


def late_pick_count(picks: List[DraftPick], config: DraftConfig) -> int:
    return sum(1 for p in picks if p.pick_no > config.bench_pick_max)


def score_volatility(late_count: int) -> float:
    """
    Score boom/bust tolerance from the number of late-round darts.

    A handful of late picks earns a bonus; more than five starts eating
    into the base score.
    """
    chaos = max(0, late_count - VOLATILITY_LATE_CAP)
    return (
        max(0.0, VOLATILITY_BASE - chaos) * VOLATILITY_SCALE
        + min(late_count, VOLATILITY_LATE_CAP) * VOLATILITY_LATE_BONUS
    )


def weighted_total(
    top_heavy: float, balance: float, depth: float, volatility: float, config: DraftConfig
) -> float:
    w = config.weights
    return (
        w.top_heavy * top_heavy
        + w.balance * balance
        + w.depth * depth
        + w.volatility * volatility
    )


def letter_grade(score: float) -> Tuple[str, str]:
    """
    Map a normalized total to (grade, note).

    Bands have inclusive lower bounds, so exactly 92.0 is an A and
    anything under 52 is a D-.
    """
    for threshold, grade, note in GRADE_SCALE:
        if score >= threshold:
            return grade, note
    return FLOOR_GRADE


def draft_tags(picks: List[DraftPick], config: DraftConfig) -> List[str]:
    """Qualitative tags, in rule order."""
    counts = position_counts(picks)
    early_positions = {p.position for p in picks if p.pick_no <= config.early_pick_max}
    tags = []
    if counts.get('RB', 0) >= 2 and 'RB' in early_positions:
        tags.append(TAG_RB_CORE)
    if counts.get('WR', 0) >= 3 and 'WR' in early_positions:
        tags.append(TAG_WR_ROOM)
    if counts.get('QB', 0) >= 2:
        tags.append(TAG_QB_DEPTH)
    if counts.get('TE', 0) >= 2:
        tags.append(TAG_TE_INSURANCE)
    if late_pick_count(picks, config) >= 6:
        tags.append(TAG_LATE_UPSIDE)
    return tags


def score_team(
    roster_id: int, owner: str, picks: List[DraftPick], config: DraftConfig
) -> TeamDraftScore:
    """Raw (un-normalized) draft score for one team."""
    top_heavy = score_top_heavy(picks, config)
    balance = score_balance(picks, config)
    depth = score_depth(picks, config)
    volatility = score_volatility(late_pick_count(picks, config))
    return TeamDraftScore(
        roster_id=roster_id,
        owner=owner,
        top_heavy_score=top_heavy,
        balance_score=balance,
        depth_score=depth,
        volatility_score=volatility,
        total=weighted_total(top_heavy, balance, depth, volatility, config),
        tags=draft_tags(picks, config),
    )


def evaluate_draft(
    picks: Iterable[DraftPick],
    rosters: Iterable[Roster],
    users: Iterable[User],
    config: Optional[DraftConfig] = None,
) -> List[TeamDraftScore]:
    """
    Grade every team that made at least one pick.

    Totals are normalized so the league's best drafter sits at 100
    (dividing by max(1, best total)), then graded against the fixed bands.

    Args:
        picks: All picks from the league's most recent draft
        rosters: League rosters (for owner lookup)
        users: League users (for owner display names)
        config: Grading configuration (defaults when omitted)

    Returns:
        TeamDraftScore list sorted ascending by total (worst to best).
        Equal totals keep ascending roster id order.
    """
    config = config or DraftConfig()
    names = build_owner_names(rosters, users)
    by_team = partition_picks(picks)

    scores = [
        score_team(roster_id, display_name(roster_id, names), team_picks, config)
        for roster_id, team_picks in by_team.items()
    ]
    if not scores:
        logger.debug('No draft picks to grade')
        return []

    max_total = max([1.0] + [s.total for s in scores])
    for s in scores:
        s.total = s.total / max_total * 100
        s.grade, s.note = letter_grade(s.total)

    logger.debug(f'Graded {len(scores)} teams (max raw total {max_total:.2f})')
    return sorted(scores, key=lambda s: s.total)
