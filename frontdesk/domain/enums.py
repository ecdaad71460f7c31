from __future__ import annotations


class Role:
    """Staff roles stored on user records."""

    RECEPTIONIST = 'Receptionist'
    HOUSEKEEPING = 'Housekeeping'



class RoomStatus:
    VACANT = 'vacant'
    READY = 'ready'
    OCCUPIED = 'occupied'

    # Rooms a guest can be checked into.
    AVAILABLE = (VACANT, READY)


class TaskStatus:
    PENDING = 'pending'
    COMPLETED = 'completed'


# Document names; each is also the array key inside its JSON file.
USERS = 'users'
ROOMS = 'rooms'
GUESTS = 'guests'
CLEANING_TASKS = 'cleaningTasks'

DOCUMENTS = (USERS, ROOMS, GUESTS, CLEANING_TASKS)


# Where each role lands after logging in; other roles go to the landing page.
ROLE_HOME_ENDPOINTS: dict[str, str] = {
    Role.RECEPTIONIST: 'reception.dashboard',
    Role.HOUSEKEEPING: 'housekeeping.cleaning_requests',
}
