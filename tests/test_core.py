"""Tests for loaders, sources and configuration."""

import io
from urllib import error

import pytest

from bean_board import fetch_beans, load_beans
from bean_board.config import BoardConfig
from bean_board.core import build_source
from bean_board.exceptions import FetchError, SourceConfigError
from bean_board.sources import SHEET_CSV_URL, FileCsvSource, SheetsCsvSource

CSV_TEXT = (
    "Timestamp,Bean/blend name,Origin,Caffeine,Roast level,Roast date,Roaster\n"
    "t,Hologram,Ethiopia,Caffeinated,Light,2024-01-10,STUMPTOWN COFFEE\n"
)


class _Response(io.BytesIO):
    def __init__(self, body: bytes, status: int = 200):
        super().__init__(body)
        self.status = status


def test_fetch_beans_uses_given_source(mocker):
    source = mocker.MagicMock()
    source.read_text.return_value = CSV_TEXT

    beans = fetch_beans(source=source)

    assert len(beans) == 1
    assert beans[0].roaster == "STUMPTOWN COFFEE"
    source.read_text.assert_called_once_with()


def test_load_beans_standardizes_names(mocker):
    source = mocker.MagicMock()
    source.read_text.return_value = CSV_TEXT

    beans = load_beans(source=source)

    assert beans[0].roaster == "Stumptown"


def test_fetch_beans_with_url_builds_sheets_source(mocker):
    urlopen = mocker.patch(
        "bean_board.sources.google_sheets.request.urlopen",
        return_value=_Response(CSV_TEXT.encode("utf-8")),
    )

    beans = fetch_beans(url="https://example.com/export.csv")

    assert beans[0].bean_name == "Hologram"
    req = urlopen.call_args.args[0]
    assert req.full_url == "https://example.com/export.csv"


def test_sheets_source_strips_bom(mocker):
    mocker.patch(
        "bean_board.sources.google_sheets.request.urlopen",
        return_value=_Response(b"\xef\xbb\xbfa,b\n"),
    )

    assert SheetsCsvSource("https://example.com").read_text() == "a,b\n"


def test_sheets_source_retries_then_succeeds(mocker):
    http_error = error.HTTPError("https://example.com", 503, "unavailable", {}, None)
    urlopen = mocker.patch(
        "bean_board.sources.google_sheets.request.urlopen",
        side_effect=[http_error, _Response(CSV_TEXT.encode("utf-8"))],
    )

    source = SheetsCsvSource("https://example.com", retries=2, retry_backoff_sec=0)

    assert source.read_text() == CSV_TEXT
    assert urlopen.call_count == 2


def test_sheets_source_raises_after_retries(mocker):
    urlopen = mocker.patch(
        "bean_board.sources.google_sheets.request.urlopen",
        side_effect=error.URLError("offline"),
    )

    source = SheetsCsvSource("https://example.com", retries=2, retry_backoff_sec=0)

    with pytest.raises(FetchError):
        source.read_text()
    assert urlopen.call_count == 3


def test_sheets_source_reports_http_status(mocker):
    mocker.patch(
        "bean_board.sources.google_sheets.request.urlopen",
        side_effect=error.HTTPError("https://example.com", 404, "not found", {}, None),
    )

    with pytest.raises(FetchError) as exc_info:
        SheetsCsvSource("https://example.com", retries=0).read_text()

    assert exc_info.value.status == 404
    assert "404" in str(exc_info.value)


def test_file_source_reads_local_export(tmp_path):
    path = tmp_path / "beans.csv"
    path.write_bytes(b"\xef\xbb\xbf" + CSV_TEXT.encode("utf-8"))

    beans = fetch_beans(source=FileCsvSource(path))

    assert beans[0].bean_name == "Hologram"


def test_file_source_missing_file_raises(tmp_path):
    with pytest.raises(FetchError):
        FileCsvSource(tmp_path / "missing.csv").read_text()


def test_build_source_selection(tmp_path):
    assert isinstance(build_source(BoardConfig()), SheetsCsvSource)
    assert isinstance(build_source(BoardConfig(source="file", csv_path=str(tmp_path / "x.csv"))), FileCsvSource)

    with pytest.raises(SourceConfigError):
        build_source(BoardConfig(source="file"))
    with pytest.raises(SourceConfigError):
        build_source(BoardConfig(source="ftp"))


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("BEAN_BOARD_CSV_URL", "https://example.com/beans.csv")
    monkeypatch.setenv("BEAN_BOARD_CACHE_TTL_SEC", "60")
    monkeypatch.setenv("BEAN_BOARD_FETCH_RETRIES", "not-a-number")
    monkeypatch.setenv("BEAN_BOARD_SOURCE", " FILE ")

    config = BoardConfig.from_env()

    assert config.csv_url == "https://example.com/beans.csv"
    assert config.cache_ttl_sec == 60
    assert config.fetch_retries == 2
    assert config.source == "file"


def test_config_defaults(monkeypatch):
    for name in ("BEAN_BOARD_CSV_URL", "BEAN_BOARD_SOURCE", "BEAN_BOARD_CACHE_TTL_SEC"):
        monkeypatch.delenv(name, raising=False)

    config = BoardConfig.from_env()

    assert config.csv_url == SHEET_CSV_URL
    assert config.source == "sheets"
    assert config.cache_ttl_sec == 300
