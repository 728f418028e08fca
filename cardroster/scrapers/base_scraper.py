from typing import Any, Dict, Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from cardroster.config.settings import settings

# Define common HTTP status codes that warrant a retry
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class RateLimitError(ScraperError):
    """Exception raised for rate limit errors (429)."""

    pass


class RetryableStatusError(ScraperError):
    """Transient HTTP status; the request is attempted again."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class BaseScraper:
    """Shared HTTP plumbing for registration-site scrapers."""

    source_name: str = "registration site"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )

    @retry(
        stop=stop_after_attempt(4),  # 3 retries after the first attempt
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(
            (httpx.TransportError, RetryableStatusError, RateLimitError)
        ),
        reraise=True,  # Reraise the last exception after max attempts
    )
    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes an asynchronous HTTP request with retry logic."""
        logger.debug(f"Making {method} request to {url}")
        response = await self.client.request(
            method, url, headers=headers, params=params, **kwargs
        )

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            logger.warning(
                f"Rate limit hit (429) for {self.source_name} at {url}. Retry-After: {retry_after}"
            )
            raise RateLimitError(f"Rate limited by {self.source_name}")

        if response.status_code in RETRYABLE_STATUS_CODES:
            logger.warning(
                f"Retrying request to {url} due to status {response.status_code}"
            )
            raise RetryableStatusError(
                f"HTTP error: {response.status_code}", response.status_code
            )

        if response.is_error:
            logger.error(
                f"HTTP error during request to {self.source_name}: {response.status_code} at {url}"
            )
            raise ScraperError(f"HTTP error: {response.status_code}")

        logger.debug(f"Request successful: {response.status_code} for {url}")
        return response

    async def request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Runs ``_make_request`` and folds transport failures into ScraperError."""
        try:
            return await self._make_request(method, url, **kwargs)
        except ScraperError:
            raise
        except httpx.TransportError as e:
            logger.error(
                f"Max retries exceeded for {self.source_name} request to {url}: {e}"
            )
            raise ScraperError(f"Could not reach {url}: {e}") from e

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.info(f"Closed HTTP client for {self.source_name}")
