"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from leaf.config import Settings
from leaf.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Settings to serve requests with, read from the
            environment when omitted

    Returns:
        Configured DI container with production providers
    """
    settings = settings or Settings()
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]

    logfire.info(
        "Container created",
        environment=settings.environment,
        comments_auto_approve=settings.comments.auto_approve,
        max_page_size=settings.comments.max_page_size,
    )

    # FastapiProvider exposes the Request to REQUEST-scoped providers
    return make_async_container(
        *provider_instances, FastapiProvider(), context={Settings: settings}
    )
