"""Exceptions raised by release-bot.

Skipped releases are not errors; they are reported as pipeline outcomes.
"""


class ReleaseBotError(Exception):
    """Base exception for all release-bot errors."""


class ConfigurationError(ReleaseBotError):
    """Raised when the CI environment cannot be interpreted."""


class MissingCredentialError(ConfigurationError):
    """Raised when no repository access token was supplied."""


class MalformedRefError(ConfigurationError):
    """Raised when the git ref is absent or not of the form refs/<kind>/<name>."""


class ManifestUnreadableError(ReleaseBotError):
    """Raised when package.json is missing or cannot be parsed."""


class NoCommitsAvailableError(ReleaseBotError):
    """Raised when a bump type is requested for an empty commit list."""
