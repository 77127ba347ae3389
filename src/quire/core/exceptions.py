"""Core exceptions for Quire."""


class QuireError(Exception):
    """Base exception for all Quire errors."""


class UnknownFilterError(QuireError):
    """Raised when a filter name does not resolve to a registered filter."""

    def __init__(self, filter_name: str) -> None:
        self.filter_name = filter_name
        super().__init__(f"The requested filter, '{filter_name}', does not exist.")


class MissingSiteConfigError(QuireError):
    """Raised when the site configuration lacks a required key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"The site configuration must specify '{key}'.")


class ManifestLoadError(QuireError):
    """Raised when an item manifest cannot be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load manifest at '{path}': {reason}")
