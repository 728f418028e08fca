import json
from typing import Optional

from loguru import logger
from pydantic import ValidationError
from supabase import AsyncClient

from cardroster.config.settings import settings
from cardroster.models.tournament import TournamentSource, TournamentsConfig
from .supabase_client import download_object

EUROBRIDGE_REPOSITORY = "https://db.eurobridge.org/repository/competitions"
WORLDBRIDGE_REPOSITORY = "https://db.worldbridge.org/Repository/tourn"


def default_tournament_config() -> TournamentsConfig:
    """Sources used when the bucket has no usable configuration."""
    return TournamentsConfig(
        tournaments={
            "26prague": TournamentSource(
                teams_url=f"{EUROBRIDGE_REPOSITORY}/26prague/Reg/displayteamsparticipanalytical.asp",
                pairs_url=f"{EUROBRIDGE_REPOSITORY}/26Prague/Reg/displaypairsparticip.asp",
            ),
            "26youthonline": TournamentSource(
                teams_url=f"{EUROBRIDGE_REPOSITORY}/26youthonline/Reg/displayteamsparticipanalytical.asp",
            ),
            "womenonline26": TournamentSource(
                teams_url=f"{WORLDBRIDGE_REPOSITORY}/womenonline.26/Reg/fullentriesreview.asp",
            ),
        }
    )


async def load_tournament_config(
    client: Optional[AsyncClient],
) -> TournamentsConfig:
    """Reads the tournaments config object, falling back to the defaults."""
    if client is None:
        logger.info("No storage client; using default tournament config.")
        return default_tournament_config()

    key = settings.tournaments_config_key
    try:
        body = await download_object(client, key)
    except Exception as e:
        # Missing object or unreachable bucket
        logger.warning(f"Could not download {key}: {e}. Using default tournament config.")
        return default_tournament_config()

    try:
        config = TournamentsConfig.model_validate(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Invalid tournament config in {key}: {e}. Using defaults.")
        return default_tournament_config()

    logger.info(f"Loaded config for {len(config.tournaments)} tournaments from {key}")
    return config
