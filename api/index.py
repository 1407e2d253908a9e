import logging
import os
from pathlib import Path
import sys

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bean_board import __version__  # noqa: E402
from bean_board.config import BoardConfig  # noqa: E402
from bean_board.filtering import BeanFilter, apply_filters, filter_options  # noqa: E402
from bean_board.schema import Bean  # noqa: E402
from bean_board.sorting import COLUMNS, DEFAULT_SORT, sort_beans  # noqa: E402
from bean_board.stats import BeanStats  # noqa: E402
from bean_board.store import BeanStore  # noqa: E402

app = FastAPI(title="bean-board API", version=__version__)
logger = logging.getLogger(__name__)
STORE = BeanStore(BoardConfig.from_env())

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class BeanListResponse(_ApiModel):
    total: int
    beans: list[Bean]
    loading: bool = False
    error: str | None = None
    fetched_at: float | None = None


class ColumnResponse(_ApiModel):
    key: str
    label: str
    sortable: bool


class FilterOptionsResponse(_ApiModel):
    origins: list[str] = Field(default_factory=list)
    roasters: list[str] = Field(default_factory=list)


class RefreshResponse(_ApiModel):
    ok: bool
    total: int
    error: str | None = None
    fetched_at: float | None = None


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


async def _current_beans() -> tuple[Bean, ...]:
    snapshot = await STORE.fetch()
    if snapshot is None:
        raise HTTPException(status_code=503, detail=STORE.error or "data unavailable")
    return snapshot.standardized


@app.get("/beans", response_model=BeanListResponse)
async def list_beans(
    response: Response,
    search: str = Query(default=""),
    origin: str | None = Query(default=None),
    roaster: str | None = Query(default=None),
    min_rating: float | None = Query(default=None, alias="minRating"),
    sort_by: str = Query(default=DEFAULT_SORT[0], alias="sortBy"),
    order: str = Query(default=DEFAULT_SORT[1]),
) -> BeanListResponse:
    beans = await _current_beans()
    criteria = BeanFilter(search_term=search, origin=origin, roaster=roaster, min_rating=min_rating)
    try:
        result = sort_beans(apply_filters(beans, criteria), sort_by, order)  # type: ignore[arg-type]
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    response.headers["Cache-Control"] = "public, max-age=60"
    snapshot = STORE.snapshot
    return BeanListResponse(
        total=len(result),
        beans=result,
        loading=STORE.loading,
        error=STORE.error,
        fetched_at=snapshot.fetched_at if snapshot else None,
    )


@app.get("/beans/raw", response_model=BeanListResponse)
async def list_raw_beans() -> BeanListResponse:
    await _current_beans()
    raw = list(STORE.raw_beans)
    return BeanListResponse(total=len(raw), beans=raw, error=STORE.error)


@app.get("/beans/{bean_id}", response_model=Bean)
async def get_bean(bean_id: int) -> Bean:
    await _current_beans()
    bean = STORE.get_bean(bean_id)
    if bean is None:
        raise HTTPException(status_code=404, detail=f"bean not found: {bean_id}")
    return bean


@app.get("/columns", response_model=list[ColumnResponse])
def columns(response: Response) -> list[ColumnResponse]:
    response.headers["Cache-Control"] = "public, max-age=86400"
    return [ColumnResponse(key=col.key, label=col.label, sortable=col.sortable) for col in COLUMNS]


@app.get("/filters/options", response_model=FilterOptionsResponse)
async def options() -> FilterOptionsResponse:
    beans = await _current_beans()
    result = filter_options(beans)
    return FilterOptionsResponse(origins=result.origins, roasters=result.roasters)


@app.get("/stats", response_model=BeanStats)
async def stats() -> BeanStats:
    await _current_beans()
    return STORE.stats()


@app.post("/refresh", response_model=RefreshResponse)
async def refresh() -> RefreshResponse:
    try:
        snapshot = await STORE.refetch()
    except Exception as exc:
        logger.exception("refresh failed")
        raise HTTPException(status_code=500, detail="internal_error") from exc
    return RefreshResponse(
        ok=STORE.error is None,
        total=len(snapshot.standardized) if snapshot else 0,
        error=STORE.error,
        fetched_at=snapshot.fetched_at if snapshot else None,
    )
