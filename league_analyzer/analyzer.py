"""Main analysis engine that ties fetching and scoring together."""

import logging
import time
from typing import Iterable, List, Optional

from .data_fetcher import SleeperAPIError, SleeperClient
from .forecast import preview_matchups
from .grading import evaluate_draft
from .lookup import build_owner_names, build_player_names
from .models import LeagueBundle, LeagueReport
from .power import power_index
from .schemas import AnalyzerConfig, Matchup
from .summary import summarize_matchups
from .validators import validate_draft_config, validate_draft_picks, validate_matchups

logger = logging.getLogger('league_analyzer.analyzer')


def week_is_scored(matchups: Iterable[Matchup]) -> bool:
    """Fallback completion check: some record has a non-zero score."""
    return any(m.points for m in matchups)


def week_is_complete(
    matchups: Iterable[Matchup], week: Optional[int], current_week: Optional[int]
) -> bool:
    """
    A week is complete once the NFL calendar has moved past it.

    Without a current week (state unavailable) fall back to the points
    check; Sleeper sends 0 for unplayed weeks.
    """
    if week is not None and current_week is not None:
        return week < current_week
    return week_is_scored(matchups)


def analyze_bundle(
    bundle: LeagueBundle,
    matchups: List[Matchup],
    config: AnalyzerConfig,
    week: Optional[int] = None,
    current_week: Optional[int] = None,
) -> LeagueReport:
    """
    Run the engine over already-fetched records.

    Draft grades feed the power index, which feeds the previews. Summaries
    are built only for completed weeks (see week_is_complete).
    """
    league_id = bundle.league.league_id
    report = LeagueReport(league_id=league_id, week=week, league=bundle.league)
    report.owner_names = build_owner_names(bundle.rosters, bundle.users)
    report.player_names = build_player_names(bundle.draft_picks)

    report.warnings.extend(validate_draft_config(config.draft))
    report.warnings.extend(validate_draft_picks(bundle.draft_picks, bundle.rosters))
    report.warnings.extend(validate_matchups(matchups, bundle.rosters))
    for warning in report.warnings:
        logger.warning(f'[{league_id}] {warning}')

    report.grades = evaluate_draft(bundle.draft_picks, bundle.rosters, bundle.users, config.draft)
    report.power = power_index(report.grades)
    report.forecast = preview_matchups(matchups, report.power)
    if week_is_complete(matchups, week, current_week):
        report.summaries = summarize_matchups(matchups, report.owner_names)

    return report


class LeagueAnalyzer:
    """Fetches and analyzes one or more Sleeper leagues."""

    def __init__(self, config: Optional[AnalyzerConfig] = None, client: Optional[SleeperClient] = None):
        self.config = config or AnalyzerConfig()
        self.client = client or SleeperClient(
            base_url=self.config.base_url, timeout=self.config.request_timeout
        )

    def current_week(self) -> int:
        state = self.client.get_nfl_state(self.config.sport)
        logger.info(f'NFL state: {state.season_type} week {state.week} ({state.season})')
        return state.week

    def analyze_league(
        self, league_id: str, week: int, current_week: Optional[int] = None
    ) -> LeagueReport:
        """
        Fetch and analyze a single league for one week.

        Fetch failures are reported on the returned LeagueReport.error
        rather than raised.
        """
        try:
            bundle = self.client.load_league_bundle(league_id)
            matchups = self.client.get_matchups(league_id, week)
        except SleeperAPIError as e:
            logger.error(f'Could not load league {league_id}: {e}')
            return LeagueReport(league_id=league_id, week=week, error=str(e))

        report = analyze_bundle(bundle, matchups, self.config, week, current_week)
        logger.info(
            f'{bundle.league.name or league_id}: {len(report.grades)} grades, '
            f'{len(report.forecast.previews)} previews, {len(report.summaries)} summaries'
        )
        return report

    def analyze_leagues(
        self, league_ids: Optional[Iterable[str]] = None, week: Optional[int] = None
    ) -> List[LeagueReport]:
        """
        Analyze several leagues in order, pausing between them.

        The NFL state is always fetched: it picks the default week and
        decides whether the week is complete enough to summarize.

        Args:
            league_ids: Leagues to analyze (defaults to config.league_ids)
            week: Week to preview/summarize (defaults to the current NFL week)
        """
        ids = list(league_ids) if league_ids is not None else list(self.config.league_ids)
        if not ids:
            return []

        current_week = None
        try:
            current_week = self.current_week()
        except SleeperAPIError as e:
            logger.error(f'Could not determine current week: {e}')
            if week is None:
                return [LeagueReport(league_id=league_id, error=str(e)) for league_id in ids]
        if week is None:
            week = current_week

        reports = []
        delay = self.config.request_delay_ms / 1000
        for i, league_id in enumerate(ids):
            if i and delay:
                time.sleep(delay)
            reports.append(self.analyze_league(league_id, week, current_week))
        return reports
