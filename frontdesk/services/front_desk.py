"""Front desk operations over the JSON record store.

Each operation loads the document(s) it needs, mutates records in place and
writes the whole document back. Check-in touches two documents (guests,
then rooms) in two separate locked updates; a failure between them leaves
the guest recorded without an occupied room.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from frontdesk.domain.enums import (
    CLEANING_TASKS,
    GUESTS,
    ROOMS,
    USERS,
    RoomStatus,
    TaskStatus,
)
from frontdesk.services.ids import IdGenerator, UUIDGenerator
from frontdesk.storage.record_store import Record, RecordStore


logger = logging.getLogger(__name__)

REQUESTED_AT_FORMAT = '%b %d, %Y, %I:%M %p'


def format_requested_at(value: Union[datetime, str, None] = None, now: Optional[datetime] = None) -> str:
    """Render a request timestamp as a display string, e.g. ``Oct 19, 2026, 02:31 PM``.

    Accepts a datetime, an ISO-8601 string (a trailing ``Z`` is allowed) or
    None for the current time. Aware values are shown in local time.
    Unparseable strings fall back to ``now``.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith('Z'):
            raw = raw[:-1] + '+00:00'
        try:
            moment = datetime.fromisoformat(raw)
        except ValueError:
            logger.warning('Ignoring unparseable requestedAt value %r', value)
            moment = now or datetime.now()
    else:
        moment = now or datetime.now()
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime(REQUESTED_AT_FORMAT)


class FrontDesk:
    """Business operations for reception and housekeeping."""

    def __init__(
        self,
        store: RecordStore,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.ids = id_generator or UUIDGenerator()
        self._clock = clock or datetime.now

    # Users

    def get_users(self) -> List[Record]:
        return self.store.read(USERS)

    def save_users(self, users: List[Record]) -> None:
        self.store.write(USERS, users)

    def get_user(self, user_id) -> Optional[Record]:
        if user_id is None:
            return None
        wanted = str(user_id)
        return next((u for u in self.get_users() if str(u.get('userId')) == wanted), None)

    def find_user(self, username: str, password: str) -> Optional[Record]:
        """Return the user whose stored username and plaintext password both match."""
        for user in self.get_users():
            if user.get('username') == username and user.get('password') == password:
                return user
        return None

    # Rooms

    def get_rooms(self) -> List[Record]:
        return self.store.read(ROOMS)

    def save_rooms(self, rooms: List[Record]) -> None:
        self.store.write(ROOMS, rooms)

    def available_rooms(self) -> List[Record]:
        return [r for r in self.get_rooms() if r.get('status') in RoomStatus.AVAILABLE]

    # Guests

    def get_guests(self) -> List[Record]:
        return self.store.read(GUESTS)

    def save_guests(self, guests: List[Record]) -> None:
        self.store.write(GUESTS, guests)

    # Cleaning tasks

    def get_cleaning_tasks(self) -> List[Record]:
        return self.store.read(CLEANING_TASKS)

    def save_cleaning_tasks(self, tasks: List[Record]) -> None:
        self.store.write(CLEANING_TASKS, tasks)

    # Composite operations

    def check_in_guest(self, name: str, contact: str, room_id: str) -> Record:
        """Record a guest and mark their room occupied.

        The guest is appended even when no room matches ``room_id``; in that
        case the rooms document is left as it was.
        """
        guest = {
            'guestId': self.ids.new_id(),
            'name': name,
            'contact': contact,
            'roomId': room_id,
        }
        with self.store.update(GUESTS) as guests:
            guests.append(guest)

        with self.store.update(ROOMS) as rooms:
            room = next((r for r in rooms if r.get('roomId') == room_id), None)
            if room is None:
                logger.warning('Checked in guest %s but room %r does not exist', guest['guestId'], room_id)
            else:
                room['status'] = RoomStatus.OCCUPIED
                room['assignedGuest'] = {'name': name}

        logger.info('Checked in guest %s to room %s', guest['guestId'], room_id)
        return guest

    def add_cleaning_task(self, room_id: str, requested_at: Union[datetime, str, None] = None, **extra) -> Record:
        """Append a pending cleaning task for ``room_id``."""
        task = {
            'taskId': self.ids.new_id(),
            **extra,
            'roomId': room_id,
            'requestedAt': format_requested_at(requested_at, now=self._clock()),
            'status': TaskStatus.PENDING,
        }
        with self.store.update(CLEANING_TASKS) as tasks:
            tasks.append(task)

        logger.info('Cleaning requested for room %s (task %s)', room_id, task['taskId'])
        return task

    def complete_cleaning_task(self, task_id: str) -> Optional[Record]:
        """Mark a task completed. Unknown ids are ignored and return None."""
        with self.store.update(CLEANING_TASKS) as tasks:
            task = next((t for t in tasks if t.get('taskId') == task_id), None)
            if task is not None:
                task['status'] = TaskStatus.COMPLETED

        if task is None:
            logger.warning('Cleaning task %r not found; nothing to complete', task_id)
        else:
            logger.info('Cleaning task %s completed', task_id)
        return task
