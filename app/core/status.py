"""
Connectivity status for the service's external dependencies.

One ConnectivityStatus instance is owned by the application (app.state.status).
The database field is written only by ContactStore and the mail field only by
ContactMailer, from their own connection lifecycle. The /ping route reads a
snapshot and never triggers any I/O.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)

PENDING = "pending"
OK = "ok"
FAILED = "failed"


@dataclass(frozen=True)
class DependencyState:
    """State of a single dependency: pending, ok, or failed with a reason."""
    state: str = PENDING
    reason: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.state == OK


DATABASE_LABELS = {
    PENDING: "⏳ Not connected yet",
    OK: "✅ Connected",
    FAILED: "❌ Connection failed: {reason}",
}

MAIL_LABELS = {
    PENDING: "⏳ Email not ready yet",
    OK: "✅ Email transporter ready",
    FAILED: "❌ Email transporter error: {reason}",
}


def render_state(dep: DependencyState, labels: Dict[str, str]) -> str:
    return labels[dep.state].format(reason=dep.reason or "unknown error")


class ConnectivityStatus:
    """Last known state of the database and the mail transport."""

    def __init__(self):
        self._database = DependencyState()
        self._mail = DependencyState()

    @property
    def database(self) -> DependencyState:
        return self._database

    @property
    def mail(self) -> DependencyState:
        return self._mail

    def set_database(self, state: str, reason: Optional[str] = None):
        new = DependencyState(state, reason)
        if new != self._database:
            logger.info(f"MongoDB status: {render_state(new, DATABASE_LABELS)}")
        self._database = new

    def set_mail(self, state: str, reason: Optional[str] = None):
        new = DependencyState(state, reason)
        if new != self._mail:
            logger.info(f"Email status: {render_state(new, MAIL_LABELS)}")
        self._mail = new

    def snapshot(self) -> Dict[str, str]:
        """Return the rendered labels for both dependencies."""
        return {
            "mongo": render_state(self._database, DATABASE_LABELS),
            "email": render_state(self._mail, MAIL_LABELS),
        }
