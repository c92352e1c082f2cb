"""Power index derived from draft grades."""

from typing import Iterable, Mapping

from .constants import DEFAULT_POWER, POWER_AVERAGE_GRADE, POWER_CENTER, POWER_SCALE
from .models import TeamDraftScore


def power_from_total(total: float) -> float:
    """Centers a 75-grade team at 50, 1.25 power per grade point. Unclamped."""
    return POWER_CENTER + (total - POWER_AVERAGE_GRADE) * POWER_SCALE


def power_index(scores: Iterable[TeamDraftScore]) -> dict[int, float]:
    """Map roster id to power from a graded draft."""
    return {s.roster_id: power_from_total(s.total) for s in scores}


def power_for(roster_id: int, power: Mapping[int, float]) -> float:
    """Power lookup; teams without a draft grade are average."""
    return power.get(roster_id, DEFAULT_POWER)
