"""Logfire setup for the API, migrations and the database engine.

Services log through logfire directly:

    with logfire.span("doubt_service.delete", doubt_id=str(doubt_id)):
        ...
        logfire.info("Doubt deleted", doubt_id=str(doubt_id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from unihub.config import Settings

SERVICE_NAME = "unihub-backend"

# Attribute names whose values are redacted before export
SCRUBBED_PATTERNS = ["auth_token", "authorization", "jwt"]

# Health checks would otherwise dominate the trace volume
UNTRACED_URLS = ["/health"]


def should_send_to_logfire(settings: Settings) -> bool:
    """An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send iff a token is set."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app or migrations start."""
    send = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_PATTERNS),
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
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    result = {**attributes, "method": request.method, "path": request.url.path}
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app except health checks."""
    logfire.instrument_fastapi(
        app,
        # Headers and cookies carry tokens
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
