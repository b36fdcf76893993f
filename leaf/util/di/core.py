"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from leaf.config import AuthSettings, CommentSettings, Settings
from leaf.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are handed to the container as context, so the app, scripts and
    tests decide which settings the comment services run with.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment settings."""
        return settings.comments
