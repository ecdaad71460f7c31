"""Front desk services built on the record store."""

from flask import current_app

from frontdesk.services.front_desk import FrontDesk


def get_front_desk() -> FrontDesk:
    """Return the FrontDesk service bound to the current app."""
    return current_app.extensions['frontdesk']
