"""Test configuration and fixtures."""

import json

import pytest

from frontdesk import create_app
from frontdesk.services.ids import SequentialIdGenerator
from frontdesk.sessions import MemorySessionStore


USERS = [
    {'userId': '1', 'username': 'alice', 'password': 'pw', 'role': 'Receptionist'},
    {'userId': '2', 'username': 'bob', 'password': 'pw', 'role': 'Housekeeping'},
    {'userId': '3', 'username': 'carol', 'password': 'pw', 'role': 'Manager'},
]

ROOMS = [
    {'roomId': '101', 'type': 'Single', 'status': 'vacant'},
    {'roomId': '102', 'type': 'Double', 'status': 'ready'},
    {'roomId': '103', 'type': 'Double', 'status': 'occupied', 'assignedGuest': {'name': 'Existing Guest'}},
]


def write_document(data_dir, name, records):
    path = data_dir / f'{name}.json'
    path.write_text(json.dumps({name: records}, indent=2), encoding='utf-8')
    return path


def seed(data_dir):
    write_document(data_dir, 'users', USERS)
    write_document(data_dir, 'rooms', ROOMS)
    write_document(data_dir, 'guests', [])
    write_document(data_dir, 'cleaningTasks', [])


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data directory holding the four fixture documents."""
    directory = tmp_path / 'data'
    directory.mkdir()
    seed(directory)
    return directory


@pytest.fixture
def session_store():
    return MemorySessionStore(ttl_seconds=3600)


@pytest.fixture
def app(data_dir, session_store):
    """Create application for testing."""
    app = create_app(
        'testing',
        overrides={
            'SECRET_KEY': 'test-secret-key',
            'DATA_DIR': str(data_dir),
        },
        session_store=session_store,
        id_generator=SequentialIdGenerator(prefix='id-'),
    )
    yield app


@pytest.fixture
def client(app):
    """Test client for making requests."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture
def front_desk(app):
    return app.extensions['frontdesk']


@pytest.fixture
def store(front_desk):
    return front_desk.store


@pytest.fixture
def login(client):
    """Log the test client in as ``username`` (password ``pw``)."""

    def _login(username, password='pw'):
        return client.post('/login', data={'username': username, 'password': password})

    return _login
