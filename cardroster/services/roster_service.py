from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from loguru import logger

from cardroster.config.settings import settings
from cardroster.models.enums import RosterMode
from cardroster.models.tournament import TournamentsConfig
from cardroster.parsing.roster_extractor import extract_roster
from cardroster.scrapers.base_scraper import ScraperError
from cardroster.scrapers.registration_scraper import RegistrationScraper

ConfigLoader = Callable[[], Awaitable[TournamentsConfig]]
RosterPayload = Dict[str, List[Dict[str, Any]]]


class RosterServiceError(Exception):
    """User-facing failure while building a roster payload."""

    pass


class RosterService:
    """Builds the ``{"teams": [...]}`` / ``{"pairs": [...]}`` payloads."""

    def __init__(self, config_loader: ConfigLoader, scraper: RegistrationScraper):
        self.config_loader = config_loader
        self.scraper = scraper

    async def get_roster(
        self, tournament_code: Optional[str], mode: Union[RosterMode, str]
    ) -> RosterPayload:
        mode = RosterMode(mode)
        tournament_code = tournament_code or settings.default_tournament

        config = await self.config_loader()
        url = config.source_url(tournament_code, mode)
        if not url:
            logger.info(f"No {mode.value} source configured for {tournament_code}")
            return {mode.value: []}

        try:
            html = await self.scraper.fetch_html(url)
        except ScraperError as e:
            logger.error(f"Error fetching {mode.value} for {tournament_code}: {e}")
            raise RosterServiceError(f"Failed to fetch {mode.value}: {e}") from e

        entities = extract_roster(html, mode)
        logger.info(
            f"Found {len(entities)} {mode.value} for tournament {tournament_code}"
        )
        return {mode.value: [entity.to_payload() for entity in entities]}

    async def get_teams(self, tournament_code: Optional[str] = None) -> RosterPayload:
        return await self.get_roster(tournament_code, RosterMode.TEAMS)

    async def get_pairs(self, tournament_code: Optional[str] = None) -> RosterPayload:
        return await self.get_roster(tournament_code, RosterMode.PAIRS)
