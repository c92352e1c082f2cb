"""Pydantic schemas for Sleeper payloads and analyzer configuration."""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from .constants import (
    BENCH_PICK_MAX,
    BENCH_PICK_MIN,
    DEFAULT_SPORT,
    EARLY_PICK_MAX,
    IDEAL_DEPTH,
    MAX_LEAGUES,
    POSITION_VALUES,
    REQUEST_DELAY_MS,
    REQUEST_TIMEOUT,
    ROUND_VALUE_OFFSET,
    ROUND_VALUE_SCALE,
    SCORING_WEIGHTS,
    SLEEPER_BASE_URL,
)


class League(BaseModel):
    """Sleeper league."""

    league_id: str
    name: str = ''
    season: str = ''
    total_rosters: int = Field(default=0, ge=0)

    class Config:
        extra = 'ignore'


class User(BaseModel):
    """League member (team owner)."""

    user_id: str
    display_name: str | None = None

    class Config:
        extra = 'ignore'


class Roster(BaseModel):
    """One team seat in a league."""

    roster_id: int = Field(..., ge=1)
    owner_id: str | None = None

    class Config:
        extra = 'ignore'


class Draft(BaseModel):
    """Draft header as listed under a league."""

    draft_id: str
    status: str = ''
    season: str = ''

    class Config:
        extra = 'ignore'


class PickMetadata(BaseModel):
    """Known metadata fields on a draft pick; anything else is dropped."""

    position: str = ''
    first_name: str = ''
    last_name: str = ''

    @field_validator('position', 'first_name', 'last_name', mode='before')
    @classmethod
    def blank_if_missing(cls, v):
        return '' if v is None else str(v)

    @field_validator('position')
    @classmethod
    def normalize_position(cls, v):
        """Position codes compare upper-case."""
        return v.strip().upper()

    class Config:
        extra = 'ignore'


class DraftPick(BaseModel):
    """One player selection in a draft."""

    player_id: str
    round: int = Field(..., ge=1)
    pick_no: int = Field(..., ge=1)
    roster_id: int
    metadata: PickMetadata = Field(default_factory=PickMetadata)

    @field_validator('metadata', mode='before')
    @classmethod
    def metadata_default(cls, v):
        return {} if v is None else v

    @property
    def position(self) -> str:
        return self.metadata.position

    @property
    def player_name(self) -> str:
        return f'{self.metadata.first_name} {self.metadata.last_name}'.strip()

    class Config:
        extra = 'ignore'


class Matchup(BaseModel):
    """One team's side of a weekly matchup."""

    matchup_id: int | None = None
    roster_id: int
    points: float | None = None
    players_points: dict[str, float] = Field(default_factory=dict)

    @field_validator('players_points', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        """Sleeper sends null before any player has scored."""
        return {} if v is None else v

    class Config:
        extra = 'ignore'


class NFLState(BaseModel):
    """Current NFL calendar state."""

    season: str
    season_type: str = ''
    week: int = Field(default=1, ge=0)

    class Config:
        extra = 'ignore'


class ScoringWeights(BaseModel):
    """Blend weights for the four draft sub-scores."""

    top_heavy: float = Field(default=SCORING_WEIGHTS['top_heavy'], ge=0, le=1)
    balance: float = Field(default=SCORING_WEIGHTS['balance'], ge=0, le=1)
    depth: float = Field(default=SCORING_WEIGHTS['depth'], ge=0, le=1)
    volatility: float = Field(default=SCORING_WEIGHTS['volatility'], ge=0, le=1)

    class Config:
        extra = 'forbid'
        frozen = True


class DraftConfig(BaseModel):
    """Tuning for a draft grading run. Position tables are read-only mappings."""

    position_values: Mapping[str, float] = Field(
        default_factory=lambda: dict(POSITION_VALUES), validate_default=True
    )
    ideal_depth: Mapping[str, int] = Field(
        default_factory=lambda: dict(IDEAL_DEPTH), validate_default=True
    )
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    round_value_scale: float = Field(default=ROUND_VALUE_SCALE, gt=0)
    round_value_offset: float = Field(default=ROUND_VALUE_OFFSET, gt=0)
    early_pick_max: int = Field(default=EARLY_PICK_MAX, ge=1)
    bench_pick_min: int = Field(default=BENCH_PICK_MIN, ge=1)
    bench_pick_max: int = Field(default=BENCH_PICK_MAX, ge=1)

    @field_validator('position_values')
    @classmethod
    def validate_multipliers(cls, v):
        """Multipliers divide the balance penalty, so they must be positive."""
        normalized = {}
        for pos, value in v.items():
            if value <= 0:
                raise ValueError(f'Position multiplier for {pos} must be positive, got {value}')
            normalized[pos.upper()] = value
        return MappingProxyType(normalized)

    @field_validator('ideal_depth')
    @classmethod
    def validate_depth(cls, v):
        normalized = {}
        for pos, count in v.items():
            if count < 0:
                raise ValueError(f'Ideal depth for {pos} cannot be negative, got {count}')
            normalized[pos.upper()] = count
        return MappingProxyType(normalized)

    @field_serializer('position_values', 'ideal_depth')
    def dump_mapping(self, v):
        return dict(v)

    @model_validator(mode='after')
    def validate_ranges(self):
        """Pick ranges must not overlap."""
        if not (self.early_pick_max <= self.bench_pick_min < self.bench_pick_max):
            raise ValueError(
                f'Invalid pick ranges: early<={self.early_pick_max}, '
                f'bench=({self.bench_pick_min}, {self.bench_pick_max}]'
            )
        return self

    class Config:
        extra = 'forbid'
        frozen = True


class AnalyzerConfig(BaseModel):
    """Analyzer settings, loaded from data/analyzer_config.json."""

    league_ids: list[str] = Field(default_factory=list)
    sport: str = DEFAULT_SPORT
    base_url: str = SLEEPER_BASE_URL
    request_timeout: float = Field(default=REQUEST_TIMEOUT, gt=0)
    request_delay_ms: int = Field(default=REQUEST_DELAY_MS, ge=0)
    draft: DraftConfig = Field(default_factory=DraftConfig)

    @field_validator('league_ids', mode='before')
    @classmethod
    def dedupe_league_ids(cls, v):
        """Strip blanks and duplicates while keeping order; only the first four are analyzed."""
        if v is None:
            return []
        seen = []
        for league_id in v:
            league_id = str(league_id).strip()
            if league_id and league_id not in seen:
                seen.append(league_id)
        return seen[:MAX_LEAGUES]

    class Config:
        extra = 'forbid'
