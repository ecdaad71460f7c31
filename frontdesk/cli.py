import click
from flask import current_app
from flask.cli import with_appcontext

from frontdesk.domain.enums import CLEANING_TASKS, DOCUMENTS, GUESTS, ROOMS, USERS, Role, RoomStatus


DEMO_DATA = {
    USERS: [
        {'userId': '1', 'username': 'alice', 'password': 'pw', 'role': Role.RECEPTIONIST},
        {'userId': '2', 'username': 'bob', 'password': 'pw', 'role': Role.HOUSEKEEPING},
    ],
    ROOMS: [
        {'roomId': '101', 'type': 'Single', 'status': RoomStatus.VACANT},
        {'roomId': '102', 'type': 'Double', 'status': RoomStatus.READY},
        {'roomId': '103', 'type': 'Double', 'status': RoomStatus.VACANT},
        {'roomId': '201', 'type': 'Suite', 'status': RoomStatus.READY},
    ],
    GUESTS: [],
    CLEANING_TASKS: [],
}


@click.command('seed-data')
@click.option('--demo', is_flag=True, help='Fill new files with demo staff and rooms.')
@with_appcontext
def seed_data_command(demo: bool) -> None:
    """Create any missing data files. Existing files are left untouched."""
    store = current_app.extensions['frontdesk'].store

    created = 0
    for name in DOCUMENTS:
        default = DEMO_DATA[name] if demo else []
        if store.ensure(name, default):
            created += 1
            click.echo(f'Created {store.path_for(name)}')
        else:
            click.echo(f'Kept existing {store.path_for(name)}')

    click.echo(f'Seeded {created} data file(s) in {store.data_dir}.')
