from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import RosterMode


class TournamentSource(BaseModel):
    """Registration pages a tournament's rosters are scraped from."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    teams_url: Optional[str] = Field(None, alias="teamsUrl")
    pairs_url: Optional[str] = Field(None, alias="pairsUrl")


class TournamentsConfig(BaseModel):
    """Contents of the tournaments configuration object."""

    model_config = ConfigDict(extra="ignore")

    tournaments: Dict[str, TournamentSource] = {}

    def source_url(self, tournament_code: str, mode: RosterMode) -> Optional[str]:
        """Returns the roster URL for a tournament and mode, if configured."""
        source = self.tournaments.get(tournament_code)
        if source is None:
            return None
        if mode == RosterMode.TEAMS:
            return source.teams_url or None
        return source.pairs_url or None
