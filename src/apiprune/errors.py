"""Shared exception classes for apiprune passes."""

from __future__ import annotations


class ApiPruneError(Exception):
    """Base class for errors raised while loading pass inputs."""


class BatchNotFoundError(ApiPruneError):
    """Raised when an API batch file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"API batch file does not exist: {path}\n"
            "Produce one with the discovery stage, or write a JSON file of the form:\n"
            '  {"apis": [{"kind": "struct", "name": "ns::A", "deps": []}]}'
        )


class BatchFormatError(ApiPruneError):
    """Raised when an API batch file is not valid JSON or has a malformed entry."""


class AllowlistNotFoundError(ApiPruneError):
    """Raised when an allowlist file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Allowlist file does not exist: {path}")


class AllowlistFormatError(ApiPruneError):
    """Raised when an allowlist file has an unexpected shape."""
