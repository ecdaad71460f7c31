"""
Staff user model for Flask-Login.

User records live in ``users.json``; this module wraps one record so
Flask-Login can track it in the session.
"""

from __future__ import annotations

from flask import current_app
from flask_login import UserMixin

from frontdesk.extensions import login_manager
from frontdesk.services import get_front_desk
from frontdesk.storage.errors import RecordStoreError


class StaffUser(UserMixin):
    """A logged-in hotel staff member."""

    def __init__(self, record: dict):
        self.record = record

    def get_id(self):
        return str(self.record.get('userId'))

    @property
    def username(self) -> str:
        return self.record.get('username') or ''

    @property
    def role(self) -> str | None:
        return self.record.get('role')

    def __repr__(self) -> str:
        return f'<StaffUser {self.username!r} role={self.role!r}>'


@login_manager.user_loader
def load_user(user_id):
    """Load user by id for Flask-Login"""
    if user_id is None:
        return None
    try:
        record = get_front_desk().get_user(user_id)
    except RecordStoreError as exc:
        current_app.logger.error('Could not load user %s: %s', user_id, exc, exc_info=True)
        return None
    if record is None:
        return None
    return StaffUser(record)
