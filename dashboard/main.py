import uvicorn
from fastapi import FastAPI

from dashboard.api.routes.dashboard import router
from dashboard.core.observability import configure_logging
from dashboard.core.observability import init_sentry
from dashboard.settings import Settings


def create_app() -> FastAPI:
    """Build the dashboard application with logging and Sentry configured."""

    settings = Settings()
    configure_logging(settings.log_level)
    init_sentry(settings)

    application = FastAPI(title="Personal Dashboard")
    application.include_router(router)
    return application


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""

    settings = Settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
