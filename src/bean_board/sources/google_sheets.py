"""Google Sheets CSV export source."""

from __future__ import annotations

import logging
import time
from urllib import error, request

from bean_board.exceptions import FetchError
from bean_board.sources.base import BaseSource

SHEET_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/1dUpWjrkeTVPtIuSVmvjXrt7zq-E_wYg-0e9JMl_glNA"
    "/export?format=csv&gid=1812115979"
)


class SheetsCsvSource(BaseSource):
    """Downloads the published spreadsheet as CSV over HTTP."""

    def __init__(
        self,
        url: str = SHEET_CSV_URL,
        *,
        timeout_sec: float = 10.0,
        retries: int = 2,
        retry_backoff_sec: float = 1.0,
    ):
        self.logger = logging.getLogger(__name__)
        self.url = url
        self.timeout_sec = timeout_sec
        self.retries = max(0, retries)
        self.retry_backoff_sec = max(0.0, retry_backoff_sec)

    def read_text(self) -> str:
        attempt = 0
        while True:
            try:
                return self._download()
            except FetchError as exc:
                if attempt >= self.retries:
                    raise
                delay = self.retry_backoff_sec * (2**attempt)
                attempt += 1
                self.logger.warning(
                    "csv fetch failed (%s), retry %d/%d in %.1fs", exc, attempt, self.retries, delay
                )
                if delay:
                    time.sleep(delay)

    def _download(self) -> str:
        req = request.Request(self.url, headers={"Accept": "text/csv"}, method="GET")
        try:
            with request.urlopen(req, timeout=self.timeout_sec) as response:
                status = getattr(response, "status", 200)
                if not 200 <= status < 300:
                    raise FetchError(f"HTTP error! status: {status}", status=status)
                body = response.read()
        except error.HTTPError as exc:
            raise FetchError(f"HTTP error! status: {exc.code}", status=exc.code) from exc
        except (error.URLError, TimeoutError, ConnectionError, ValueError) as exc:
            raise FetchError(f"Failed to fetch data: {exc}") from exc

        return body.decode("utf-8-sig", errors="replace")

    def describe(self) -> str:
        return f"sheets:{self.url}"
