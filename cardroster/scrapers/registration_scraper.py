from loguru import logger

from .base_scraper import BaseScraper

HTML_ACCEPT_HEADER = "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8"


class RegistrationScraper(BaseScraper):
    """Fetches team and pair listing pages from tournament registration sites."""

    source_name: str = "registration site"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.client.headers.update({"Accept": HTML_ACCEPT_HEADER})

    async def fetch_html(self, url: str) -> str:
        """Returns the page body as text; failures raise ScraperError."""
        logger.info(f"Fetching registration page {url}")
        response = await self.request("GET", url)
        html = response.text
        logger.debug(f"Fetched {len(html)} characters from {url}")
        return html
