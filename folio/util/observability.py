"""Logfire setup and library instrumentation.

Application code logs and traces through logfire directly:

    logfire.info("Post created", post_id=str(post.id))

    with logfire.span("create_post.execute", title=title):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from folio.config import Settings

SERVICE_NAME = "folio-api"
SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry goes to the Logfire cloud when
    ``settings.observability.sends_to_cloud`` holds; console output is
    always on and verbose in debug mode.

    Args:
        settings: Application settings
    """
    observability = settings.observability

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=observability.sends_to_cloud,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=observability.sends_to_cloud,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health probes.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, capture_headers=True, excluded_urls="/health")
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through an engine.

    Args:
        engine: SQLAlchemy async engine
    """
    # Span context is appended to each statement as a SQL comment
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound blob-store calls."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
