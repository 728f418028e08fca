import sys
import asyncio
import json
from typing import Any, Dict, Optional

# --- Settings/Logging ---
from cardroster.logging.setup import setup_logging
from cardroster.config.settings import settings

setup_logging()

from loguru import logger

# --- End Settings/Logging ---

from cardroster.models.enums import RosterMode
from cardroster.scrapers.registration_scraper import RegistrationScraper
from cardroster.services.roster_service import RosterService, RosterServiceError
from cardroster.storage.supabase_client import initialize_supabase
from cardroster.storage.tournament_config import load_tournament_config

from rich import print
from rich.panel import Panel


def summarize(payloads: Dict[str, Any]) -> str:
    lines = []
    for mode, entities in payloads.items():
        lines.append(f"[bold]{mode}[/bold]: {len(entities)}")
        for entity in entities[:3]:
            surnames = " - ".join(p["surname"] for p in entity["players"])
            lines.append(f"  {entity['event']} | {entity['name']} ({surnames})")
    return "\n".join(lines)


async def main(tournament_code: Optional[str] = None) -> int:
    """Fetches teams and pairs for one tournament and writes a snapshot."""
    tournament_code = tournament_code or settings.default_tournament
    logger.info(f"Starting roster fetch for tournament {tournament_code}")

    storage_client = await initialize_supabase()
    scraper = RegistrationScraper()
    service = RosterService(lambda: load_tournament_config(storage_client), scraper)

    payloads: Dict[str, Any] = {}
    try:
        for mode in RosterMode:
            try:
                payloads.update(await service.get_roster(tournament_code, mode))
            except RosterServiceError as e:
                logger.error(str(e))
                payloads[mode.value] = []
    finally:
        await scraper.close()

    if not any(payloads.values()):
        logger.warning(f"No teams or pairs found for {tournament_code}.")
        return 1

    try:
        with open(settings.snapshot_file, "w", encoding="utf-8") as f:
            json.dump(payloads, f, indent=2, ensure_ascii=False)
        logger.success(f"Saved roster snapshot to {settings.snapshot_file}")
    except IOError as e:
        logger.error(f"Failed to write snapshot to {settings.snapshot_file}: {e}")

    print(Panel(summarize(payloads), title=f"Rosters for {tournament_code}"))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None)))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
