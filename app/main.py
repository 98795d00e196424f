"""
FastAPI application entry point.

Run:  python -m uvicorn app.main:app --reload --port 8000
"""
from __future__ import annotations

from infrastructure.logging_setup import configure_logging

configure_logging(force=False)

from fastapi import FastAPI

from services.sort_service import SortService
from app.routes import router, init_service

app = FastAPI(title="Omegasort")

init_service(SortService())

# API routes
app.include_router(router)
