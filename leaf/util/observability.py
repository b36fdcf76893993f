"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Comment created", comment_id=str(comment.id))

    # Manual spans for critical operations
    with logfire.span("comment_tree.build_tree", article_id=str(article_id)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from leaf.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the comment service.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    observability = settings.observability

    logfire.configure(
        service_name="leaf-api",
        service_version="0.1.0",
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.sends_to_logfire,
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
        debug=settings.debug,
        send_to_logfire=observability.sends_to_logfire,
        comments_auto_approve=settings.comments.auto_approve,
    )


def map_request_attributes(
    request: Request, attributes: dict[str, Any]
) -> dict[str, Any]:
    """Tag a request span with the comment thread it reads or changes.

    Spans can then be filtered by article, comment or subject (an article's
    thread, the guestbook, or the moderation panel). Only whether the caller
    sent a token is recorded, never the token itself.

    Args:
        request: Incoming request
        attributes: Attributes Logfire collected for the span

    Returns:
        Attributes with the comment context added
    """
    result = {**attributes, "method": request.method, "path": request.url.path}

    if request.client:
        result["client_host"] = request.client.host

    for name in ("article_id", "comment_id"):
        if name in request.path_params:
            result[name] = request.path_params[name]

    path = request.url.path
    if path.startswith("/blog/guestbook"):
        result["subject"] = "guestbook"
    elif path.startswith("/blog/articles/"):
        result["subject"] = "article"
    elif path.startswith("/comments"):
        result["subject"] = "moderation"

    for name in ("page", "limit", "status"):
        if name in request.query_params:
            result[name] = request.query_params[name]

    result["signed_in"] = "auth_token" in request.cookies

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
