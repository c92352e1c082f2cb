"""Sleeper API data fetching."""

import logging
from typing import Any, Optional

import requests
from pydantic import BaseModel, ValidationError

from .constants import DEFAULT_SPORT, REQUEST_TIMEOUT, SLEEPER_BASE_URL
from .models import LeagueBundle
from .schemas import Draft, DraftPick, League, Matchup, NFLState, Roster, User

logger = logging.getLogger('league_analyzer.data_fetcher')


class SleeperAPIError(Exception):
    """A Sleeper request failed or returned a payload we can't use."""


class SleeperClient:
    """Fetches league, draft and matchup records from the public Sleeper API."""

    def __init__(
        self,
        base_url: str = SLEEPER_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_json(self, path: str) -> Any:
        url = f'{self.base_url}/{path.lstrip("/")}'
        logger.debug(f'GET {url}')
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.warning(f'Request failed for {url}: {e}')
            raise SleeperAPIError(f'Fetch failed: {url}: {e}') from e
        except ValueError as e:
            logger.warning(f'Invalid JSON from {url}: {e}')
            raise SleeperAPIError(f'Invalid JSON from {url}') from e

    def _parse(self, schema: type[BaseModel], data: Any, what: str) -> Any:
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.error(f'Malformed {what}: {e}')
            raise SleeperAPIError(f'Malformed {what}: {e}') from e

    def _parse_list(self, schema: type[BaseModel], data: Any, what: str) -> list:
        if data is None:
            return []
        if not isinstance(data, list):
            raise SleeperAPIError(f'Expected a list of {what}, got {type(data).__name__}')
        return [self._parse(schema, item, what) for item in data]

    def get_league(self, league_id: str) -> League:
        return self._parse(League, self._get_json(f'league/{league_id}'), 'league')

    def get_users(self, league_id: str) -> list[User]:
        return self._parse_list(User, self._get_json(f'league/{league_id}/users'), 'users')

    def get_rosters(self, league_id: str) -> list[Roster]:
        return self._parse_list(Roster, self._get_json(f'league/{league_id}/rosters'), 'rosters')

    def get_drafts(self, league_id: str) -> list[Draft]:
        """Drafts for a league, newest first."""
        return self._parse_list(Draft, self._get_json(f'league/{league_id}/drafts'), 'drafts')

    def get_draft_picks(self, draft_id: str) -> list[DraftPick]:
        return self._parse_list(DraftPick, self._get_json(f'draft/{draft_id}/picks'), 'draft picks')

    def get_matchups(self, league_id: str, week: int) -> list[Matchup]:
        """Matchup records for a week; Sleeper returns null for weeks it doesn't know."""
        data = self._get_json(f'league/{league_id}/matchups/{week}')
        return self._parse_list(Matchup, data, 'matchups')

    def get_nfl_state(self, sport: str = DEFAULT_SPORT) -> NFLState:
        return self._parse(NFLState, self._get_json(f'state/{sport}'), 'state')

    def load_league_bundle(self, league_id: str) -> LeagueBundle:
        """
        Fetch league, users, rosters and the most recent draft's picks.

        Args:
            league_id: Sleeper league id

        Returns:
            LeagueBundle (draft_picks empty when the league has no draft)

        Raises:
            SleeperAPIError: If any request fails or returns a malformed payload
        """
        league = self.get_league(league_id)
        users = self.get_users(league_id)
        rosters = self.get_rosters(league_id)

        picks: list[DraftPick] = []
        drafts = self.get_drafts(league_id)
        if drafts:
            draft = drafts[0]
            logger.debug(f'League {league_id}: using draft {draft.draft_id} ({draft.season} {draft.status})')
            picks = self.get_draft_picks(draft.draft_id)
        else:
            logger.info(f'League {league_id} has no drafts yet')

        logger.debug(
            f'Loaded league {league_id}: {len(users)} users, {len(rosters)} rosters, {len(picks)} picks'
        )
        return LeagueBundle(league=league, users=users, rosters=rosters, draft_picks=picks)
