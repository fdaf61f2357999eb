"""Domain exceptions.

Provider failures are raised by the low-level fetch helpers and always
recovered inside the resolvers; they never reach the HTTP layer.
"""

from __future__ import annotations


class CoverError(Exception):
    """Base class for cover generation errors."""


class IconFetchError(CoverError):
    def __init__(self, prefix: str, name: str, reason: str) -> None:
        super().__init__(f"Icon {prefix}/{name} unavailable: {reason}")
        self.prefix = prefix
        self.name = name
        self.reason = reason


class BackgroundFetchError(CoverError):
    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"Background provider {provider} failed: {reason}")
        self.provider = provider
        self.reason = reason
