"""One-shot loading helpers."""

from bean_board.config import BoardConfig
from bean_board.exceptions import SourceConfigError
from bean_board.normalization import standardize_names
from bean_board.records import parse_beans
from bean_board.schema import Bean
from bean_board.sources.base import BaseSource


def _build_sheets_source(config: BoardConfig) -> BaseSource:
    from bean_board.sources.google_sheets import SheetsCsvSource

    return SheetsCsvSource(
        config.csv_url,
        timeout_sec=config.fetch_timeout_sec,
        retries=config.fetch_retries,
        retry_backoff_sec=config.retry_backoff_sec,
    )


def _build_file_source(config: BoardConfig) -> BaseSource:
    from bean_board.sources.file import FileCsvSource

    if not config.csv_path:
        raise SourceConfigError("BEAN_BOARD_CSV_PATH is required for the file source")
    return FileCsvSource(config.csv_path)


def build_source(config: BoardConfig | None = None) -> BaseSource:
    """Build the CSV source named by ``config.source``."""
    config = config or BoardConfig.from_env()
    source_name = config.source.strip().lower()
    if source_name in {"sheets", "google_sheets", "http"}:
        return _build_sheets_source(config)
    if source_name in {"file", "csv"}:
        return _build_file_source(config)
    raise SourceConfigError(f"Unsupported source: {source_name}")


def fetch_beans(
    *,
    url: str | None = None,
    source: BaseSource | None = None,
) -> list[Bean]:
    """Fetch the CSV export and parse it into raw Bean records.

    Args:
        url: CSV export URL. Overrides ``BEAN_BOARD_CSV_URL``.
        source: Explicit source; takes precedence over ``url``.

    Returns:
        Records with dense 1-based ids, names not yet standardized.

    Raises:
        FetchError: If the export cannot be retrieved.
    """
    if source is None:
        config = BoardConfig.from_env()
        if url:
            config = BoardConfig(
                csv_url=url,
                fetch_timeout_sec=config.fetch_timeout_sec,
                fetch_retries=config.fetch_retries,
                retry_backoff_sec=config.retry_backoff_sec,
            )
        source = build_source(config)
    return parse_beans(source.read_text())


def load_beans(
    *,
    url: str | None = None,
    source: BaseSource | None = None,
    dictionary_version: str = "v1",
) -> list[Bean]:
    """Fetch, parse and standardize the bean records."""
    raw = fetch_beans(url=url, source=source)
    return list(standardize_names(raw, dictionary_version=dictionary_version))
