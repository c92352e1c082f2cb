from .models import (
    Forecast,
    LeagueBundle,
    LeagueReport,
    PairedMatchup,
    Preview,
    StarPerformer,
    Summary,
    TeamDraftScore,
    UnpairedMatchup,
)
from .schemas import (
    AnalyzerConfig,
    DraftConfig,
    DraftPick,
    League,
    Matchup,
    Roster,
    ScoringWeights,
    User,
)
from .grading import evaluate_draft, letter_grade
from .power import power_index, power_from_total
from .pairing import pair_matchups
from .forecast import preview_matchups, favorite_label
from .summary import summarize_matchups, star_performer
from .data_fetcher import SleeperClient, SleeperAPIError
from .analyzer import LeagueAnalyzer, analyze_bundle
from .config import get_config, load_config

__all__ = [
    # Models
    'Forecast',
    'LeagueBundle',
    'LeagueReport',
    'PairedMatchup',
    'Preview',
    'StarPerformer',
    'Summary',
    'TeamDraftScore',
    'UnpairedMatchup',
    # Schemas
    'AnalyzerConfig',
    'DraftConfig',
    'DraftPick',
    'League',
    'Matchup',
    'Roster',
    'ScoringWeights',
    'User',
    # Engine
    'evaluate_draft',
    'letter_grade',
    'power_index',
    'power_from_total',
    'pair_matchups',
    'preview_matchups',
    'favorite_label',
    'summarize_matchups',
    'star_performer',
    # Fetching
    'SleeperClient',
    'SleeperAPIError',
    'LeagueAnalyzer',
    'analyze_bundle',
    # Config
    'get_config',
    'load_config',
]
