"""
API routes for sorting and checking lines over HTTP.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Optional

from core import (
    CheckError,
    NotSortedError,
    NotUniqueError,
    HasUnexpectedEmptyLinesError,
    PathFlavor,
    SortError,
    SortOptions,
    Strategy,
)
from infrastructure import get_handler, registered_strategies
from services.sort_service import SortService


router = APIRouter(prefix="/api")

# Singleton service, created in main.py and attached here
_service: Optional[SortService] = None


def init_service(service: SortService) -> None:
    global _service
    _service = service


def svc() -> SortService:
    if _service is None:
        raise RuntimeError("SortService not initialized")
    return _service


# ------------------------------------------------------------------
# Request / response models
# ------------------------------------------------------------------

class SortRequest(BaseModel):
    lines: list[str]
    strategy: Strategy = Strategy.TEXT
    locale: Optional[str] = None
    unique: bool = False
    case_insensitive: bool = False
    reverse: bool = False
    windows: bool = False

    def to_options(self) -> SortOptions:
        return SortOptions(
            strategy=self.strategy,
            locale=self.locale,
            case_insensitive=self.case_insensitive,
            reverse=self.reverse,
            unique=self.unique,
            path_flavor=PathFlavor.WINDOWS if self.windows else PathFlavor.UNIX,
        )


class SortResponse(BaseModel):
    lines: list[str]


class CheckResponse(BaseModel):
    sorted: bool


class StrategyInfo(BaseModel):
    name: str
    description: str
    supports_locale: bool
    supports_path_flavor: bool


def _check_error_kind(exc: CheckError) -> str:
    if isinstance(exc, NotSortedError):
        return "not_sorted"
    if isinstance(exc, NotUniqueError):
        return "not_unique"
    if isinstance(exc, HasUnexpectedEmptyLinesError):
        return "unexpected_empty_lines"
    return "check_failed"


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("/strategies", response_model=list[StrategyInfo])
def list_strategies():
    """List the available sort strategies and the options they accept."""
    return [
        StrategyInfo(
            name=strategy.value,
            description=get_handler(strategy).description,
            supports_locale=strategy.supports_locale,
            supports_path_flavor=strategy.supports_path_flavor,
        )
        for strategy in registered_strategies()
    ]


@router.post("/sort", response_model=SortResponse)
def sort_lines(req: SortRequest):
    """Sort the given lines."""
    try:
        return SortResponse(lines=svc().sort_lines(req.lines, req.to_options()))
    except SortError as e:
        raise HTTPException(400, str(e))


@router.post("/check", response_model=CheckResponse)
def check_lines(req: SortRequest):
    """Check that the given lines are already sorted (and unique)."""
    try:
        return CheckResponse(sorted=svc().check_lines(req.lines, req.to_options()))
    except CheckError as e:
        raise HTTPException(409, {"error": _check_error_kind(e), "message": str(e)})
    except SortError as e:
        raise HTTPException(400, str(e))
