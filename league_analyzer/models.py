"""Data models for derived analyzer records."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .schemas import DraftPick, League, Matchup, Roster, User


@dataclass
class TeamDraftScore:
    """Container for one team's draft grade."""
    roster_id: int
    owner: str
    top_heavy_score: float
    balance_score: float
    depth_score: float
    volatility_score: float
    total: float  # normalized within the league, best drafter = 100
    grade: str = ''
    note: str = ''
    tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PairedMatchup:
    """A matchup group with exactly two sides."""
    matchup_id: int
    a: Matchup
    b: Matchup


@dataclass(frozen=True)
class UnpairedMatchup:
    """A matchup group that is not a two-sided game (bye, odd league, missing id)."""
    matchup_id: Optional[int]
    sides: List[Matchup]


PairingResult = Union[PairedMatchup, UnpairedMatchup]


@dataclass
class Preview:
    """Forecast for one upcoming game."""
    matchup_id: int
    team_a: int
    team_b: int
    power_a: float
    power_b: float
    diff: float

    @property
    def favorite(self) -> Optional[int]:
        """Roster id of the higher-power side, None for a toss-up."""
        if self.power_a == self.power_b:
            return None
        return self.team_a if self.power_a > self.power_b else self.team_b


@dataclass
class Forecast:
    """All previews for a week, closest game first."""
    previews: List[Preview] = field(default_factory=list)
    unpaired: List[UnpairedMatchup] = field(default_factory=list)

    @property
    def game_of_the_week(self) -> Optional[Preview]:
        return self.previews[0] if self.previews else None


@dataclass(frozen=True)
class StarPerformer:
    """Highest single-player score in a completed game."""
    player_id: str
    points: float


@dataclass
class Summary:
    """Result of one completed game."""
    matchup_id: int
    team_a: int
    team_b: int
    name_a: str
    name_b: str
    points_a: float
    points_b: float
    winner: str  # display name, or TIE
    margin: float
    star: Optional[StarPerformer] = None

    @property
    def is_tie(self) -> bool:
        return self.points_a == self.points_b


@dataclass
class LeagueBundle:
    """Everything fetched once per league."""
    league: League
    users: List[User] = field(default_factory=list)
    rosters: List[Roster] = field(default_factory=list)
    draft_picks: List[DraftPick] = field(default_factory=list)


@dataclass
class LeagueReport:
    """Engine output for one league and week."""
    league_id: str
    week: Optional[int] = None
    league: Optional[League] = None
    grades: List[TeamDraftScore] = field(default_factory=list)
    power: Dict[int, float] = field(default_factory=dict)
    forecast: Forecast = field(default_factory=Forecast)
    summaries: List[Summary] = field(default_factory=list)
    owner_names: Dict[int, str] = field(default_factory=dict)
    player_names: Dict[str, str] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
