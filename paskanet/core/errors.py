"""Shared error types.

The goal is to make errors explicit and easy to handle at the UI boundary.
Window operations never raise: stale ids are absorbed by the store.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Base error for shell-level failures."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:  # pragma: no cover
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"


class ValidationError(AppError):
    """Invalid user input or configuration."""


class CredentialRejected(ValidationError):
    """Wrong password at the login gate. Recoverable, no state change."""


class InvalidTransition(AppError):
    """Session asked to take an edge outside its cycle."""


class InfrastructureError(AppError):
    """IO/OS failures (mock data file, settings)."""
