"""
Error taxonomy and centralized error handling for the combat engine.
"""

import logging
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ErrorSeverity(Enum):
    """Enumeration of error severity levels for the engine's error handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CombatError(Exception):
    """Base class for every error raised by the combat engine."""

    severity: ErrorSeverity = ErrorSeverity.HIGH

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class InvalidAction(CombatError):
    """
    The action source produced a token the engine does not understand.

    The hero hesitates: the turn is consumed with no effect.
    """

    severity = ErrorSeverity.LOW


class InsufficientResource(CombatError):
    """
    A skill is on cooldown or the hero lacks the mana to cast it.

    The hero is asked again: the turn is not consumed.
    """

    severity = ErrorSeverity.LOW


class IllegalState(CombatError):
    """An operation was attempted on an encounter that already ended."""

    severity = ErrorSeverity.CRITICAL


@dataclass
class GameError:
    """Represents a game error with severity, context, and optional exception information."""

    message: str
    severity: ErrorSeverity
    context: dict[str, Any] = field(default_factory=dict)
    exception: Optional[Exception] = None


class ErrorHandler:
    """Keeps the history of recovered errors for one encounter and logs them."""

    def __init__(self) -> None:
        self.logger = logging.getLogger("deathsgame.errors")
        self.error_history: list[GameError] = []

    def handle(
        self,
        message: str,
        severity: ErrorSeverity,
        context: Optional[dict[str, Any]] = None,
        exception: Optional[Exception] = None,
    ) -> GameError:
        """Record an error and log it according to its severity."""
        error = GameError(
            message=message,
            severity=severity,
            context=context or {},
            exception=exception,
        )
        self.error_history.append(error)

        # Prefix context keys to avoid conflicts with logging system reserved keys
        safe_context = {f"ctx_{key}": value for key, value in error.context.items()}

        if error.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"CRITICAL: {error.message}", extra=safe_context)
            if error.exception:
                self.logger.critical(traceback.format_exc())
        elif error.severity == ErrorSeverity.HIGH:
            self.logger.error(f"ERROR: {error.message}", extra=safe_context)
        elif error.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"WARNING: {error.message}", extra=safe_context)
        else:
            self.logger.info(f"INFO: {error.message}", extra=safe_context)
        return error

    def handle_exception(self, error: CombatError) -> GameError:
        """Record a combat exception using its own severity and context."""
        return self.handle(error.message, error.severity, error.context, error)

    def count(self, error_type: type[CombatError]) -> int:
        """Number of recorded errors raised as the given exception type."""
        return sum(
            1 for entry in self.error_history if isinstance(entry.exception, error_type)
        )
