"""FastAPI application."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leaf.config import Settings
from leaf.interface.api.routes import admin_comments, blog_comments, guestbook, health
from leaf.util.di.container import create_container
from leaf.util.observability import instrument_fastapi


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it with console output off.

    Args:
        container: DI container to serve requests from (production
            container when omitted)
        settings: Settings for CORS and the production container, read
            from the environment when omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Leaf API",
        description="Comment, guestbook and moderation backend for the Leaf blog",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_dishka(container or create_container(settings), app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(blog_comments.router)
    app_instance.include_router(guestbook.router)
    app_instance.include_router(admin_comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
