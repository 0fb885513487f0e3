"""Colored audit logger — ANSI-colored console lines for security-relevant events.

Provides an AuditLogger with color-coded output per audit category so that
sign-ins and client-access decisions stand out in the terminal.

Color scheme:
    🟢 Green   — Sign-in / sign-out
    🔵 Blue    — Access requests
    🟣 Magenta — Access granted / revoked decisions
    🟡 Yellow  — Recommendations
    🟠 Cyan    — Subscriptions & clients
    🔴 Red     — Denials and failures
"""

import logging
from typing import Any

AUDIT_LOGGER_PREFIX = "advisordesk.audit"


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Audit Categories ─────────────────────────────────────────────────

class AuditCategory:
    """Predefined audit categories with colors and icons."""

    AUTH = ("AUTH", _Colors.GREEN, "🔑")
    ACCESS_REQUEST = ("ACCESS_REQ", _Colors.BLUE, "📨")
    ACCESS_DECISION = ("ACCESS", _Colors.MAGENTA, "🛡️")
    RECOMMENDATION = ("RECOMMEND", _Colors.YELLOW, "📈")
    SUBSCRIPTION = ("SUBSCRIPTION", _Colors.CYAN, "🏷️")
    CLIENT = ("CLIENT", _Colors.CYAN, "👤")
    DENIED = ("DENIED", _Colors.RED, "⛔")


def _format_details(kwargs: dict[str, Any]) -> str:
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_Colors.GRAY}({details}){_Colors.RESET}"


# ── AuditLogger ──────────────────────────────────────────────────────

class AuditLogger:
    """Color-coded logger for audit events.

    Usage:
        audit = AuditLogger("AuthorizationService")
        audit.event(AuditCategory.ACCESS_REQUEST, "Access requested", client_id="c1")
        audit.denied(AuditCategory.ACCESS_DECISION, "Approval refused", actor_id="u7")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(f"{AUDIT_LOGGER_PREFIX}.{component_name}")

    def event(self, category: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a successful audit event in its category color."""
        label, color, icon = category
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.info(formatted)

    def denied(
        self,
        category: tuple[str, str, str],
        message: str,
        error: Exception | None = None,
        **kwargs: Any,
    ) -> None:
        """Log a refused action in red."""
        label, _, _ = category
        _, _, icon = AuditCategory.DENIED
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.warning(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed) at debug level."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.debug(formatted)
