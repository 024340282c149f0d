"""Unified exception hierarchy for flysession.

All library exceptions inherit from FlySessionException, enabling unified
error handling at the application edge.

Categories:
- ConfigurationException: invalid setup (missing or weak secret, bad store)
- SecretRotationException: rejected secret key store mutations
- InfrastructureException: session store I/O failures
- SessionNotFoundException: store signal for an unknown session id
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class FlySessionException(Exception):
    """Base exception for all flysession errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_CONFIG_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(FlySessionException):
    """Session management is misconfigured and cannot start."""


class InvalidSecretException(ConfigurationException):
    """A signing secret is missing, not a string, or shorter than the minimum length."""


# =============================================================================
# Secret Rotation Exceptions
# =============================================================================


class SecretRotationException(FlySessionException):
    """A secret key store mutation was rejected."""


class SigningSecretRemovalException(SecretRotationException):
    """The active signing secret cannot be removed directly."""


# =============================================================================
# Store Exceptions
# =============================================================================


class InfrastructureException(FlySessionException):
    """Infrastructure failures: database, cache, network."""


class SessionStoreException(InfrastructureException):
    """A session store failed to read, write, or delete a session."""


class SessionNotFoundException(FlySessionException):
    """The store holds no session under the requested id.

    Not an error for the negotiator: it is always mapped to "no session".
    """

    def __init__(self, session_id: str) -> None:
        super().__init__(
            f"Session '{session_id}' not found",
            code="SESSION_NOT_FOUND",
            context={"session_id": session_id},
        )
        self.session_id = session_id
