from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date

from fastapi import Request

from litterbook.config.settings import Settings
from litterbook.infrastructure.db.session import SQLAlchemyUnitOfWork
from litterbook.infrastructure.reports.pdf_generator import PDFGenerator


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not configured")
    return settings


def get_pdf_generator(request: Request) -> PDFGenerator:
    generator = getattr(request.app.state, "pdf_generator", None)
    if generator is None:
        raise RuntimeError("PDF generator not configured")
    return generator


def get_today() -> date:
    return date.today()
