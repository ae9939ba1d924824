import logging
from collections.abc import Generator

import httpx
from fastapi import APIRouter
from fastapi import Depends
from fastapi.responses import HTMLResponse
from fastapi.responses import PlainTextResponse
from fastapi.responses import Response
from jinja2 import TemplateError

from dashboard.api.schemas.contributions import DashboardPage
from dashboard.services.dashboard_service import DashboardError
from dashboard.services.dashboard_service import get_fixture_dashboard
from dashboard.services.dashboard_service import get_live_dashboard
from dashboard.services.dashboard_service import render_dashboard
from dashboard.settings import Settings
from dashboard.settings import get_settings


logger = logging.getLogger(__name__)

router = APIRouter()


def get_http_client(
    settings: Settings = Depends(get_settings),
) -> Generator[httpx.Client, None, None]:
    with httpx.Client(timeout=settings.http_timeout_seconds) as client:
        yield client


def _html_response(page: DashboardPage) -> Response:
    try:
        body = render_dashboard(page)
    except TemplateError as exc:
        logger.exception("Rendering dashboard template failed")
        return PlainTextResponse(str(exc), status_code=500)
    return HTMLResponse(body)


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/dash/", response_class=HTMLResponse)
def get_dashboard(
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_http_client),
) -> Response:
    """Render the dashboard from live GitHub (and weather) data."""

    try:
        page = get_live_dashboard(client=client, settings=settings)
    except DashboardError as exc:
        logger.exception("Building live dashboard failed")
        return PlainTextResponse(str(exc), status_code=500)

    return _html_response(page)


@router.get("/test/", response_class=HTMLResponse)
def get_test_dashboard(settings: Settings = Depends(get_settings)) -> Response:
    """Render the dashboard from the saved contribution fixture."""

    try:
        page = get_fixture_dashboard(settings)
    except DashboardError as exc:
        logger.exception("Building fixture dashboard failed")
        return PlainTextResponse(str(exc), status_code=500)

    return _html_response(page)
