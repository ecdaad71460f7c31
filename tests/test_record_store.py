"""Record store: whole-file JSON documents with per-document locking."""

import json
import threading

import pytest

from frontdesk.storage import RecordFileError, RecordParseError, RecordStore


@pytest.fixture
def tmp_store(tmp_path):
    return RecordStore(str(tmp_path))


def test_read_returns_named_array(tmp_path, tmp_store):
    (tmp_path / 'rooms.json').write_text(json.dumps({'rooms': [{'roomId': '101'}]}), encoding='utf-8')
    assert tmp_store.read('rooms') == [{'roomId': '101'}]


def test_write_wraps_records_in_named_object(tmp_path, tmp_store):
    tmp_store.write('guests', [{'guestId': 'g1', 'name': 'Ann'}])
    payload = json.loads((tmp_path / 'guests.json').read_text(encoding='utf-8'))
    assert payload == {'guests': [{'guestId': 'g1', 'name': 'Ann'}]}


def test_write_overwrites_whole_file(tmp_store):
    tmp_store.write('guests', [{'guestId': 'g1'}, {'guestId': 'g2'}])
    tmp_store.write('guests', [{'guestId': 'g3'}])
    assert tmp_store.read('guests') == [{'guestId': 'g3'}]


def test_write_leaves_no_temp_files(tmp_path, tmp_store):
    tmp_store.write('guests', [])
    assert sorted(p.name for p in tmp_path.iterdir()) == ['guests.json']


def test_missing_array_key_reads_as_empty(tmp_path, tmp_store):
    (tmp_path / 'guests.json').write_text('{}', encoding='utf-8')
    assert tmp_store.read('guests') == []


def test_unknown_fields_survive_rewrite(tmp_path, tmp_store):
    (tmp_path / 'rooms.json').write_text(
        json.dumps({'rooms': [{'roomId': '101', 'floor': 1, 'notes': 'sea view'}]}), encoding='utf-8'
    )
    with tmp_store.update('rooms') as rooms:
        rooms[0]['status'] = 'ready'
    assert tmp_store.read('rooms') == [{'roomId': '101', 'floor': 1, 'notes': 'sea view', 'status': 'ready'}]


def test_missing_file_raises_file_error(tmp_store):
    with pytest.raises(RecordFileError):
        tmp_store.read('rooms')


def test_malformed_json_raises_parse_error(tmp_path, tmp_store):
    (tmp_path / 'rooms.json').write_text('{"rooms": [', encoding='utf-8')
    with pytest.raises(RecordParseError):
        tmp_store.read('rooms')


@pytest.mark.parametrize('content', ['[]', '"rooms"', '{"rooms": {"roomId": "101"}}'])
def test_wrong_shape_raises_parse_error(tmp_path, tmp_store, content):
    (tmp_path / 'rooms.json').write_text(content, encoding='utf-8')
    with pytest.raises(RecordParseError):
        tmp_store.read('rooms')


@pytest.mark.parametrize('name', ['', '.', '..', '../users', 'a/b'])
def test_invalid_document_names_are_rejected(tmp_store, name):
    with pytest.raises(ValueError):
        tmp_store.path_for(name)


def test_update_does_not_write_when_block_raises(tmp_store):
    tmp_store.write('cleaningTasks', [{'taskId': 't1', 'status': 'pending'}])

    with pytest.raises(RuntimeError):
        with tmp_store.update('cleaningTasks') as tasks:
            tasks[0]['status'] = 'completed'
            raise RuntimeError('boom')

    assert tmp_store.read('cleaningTasks') == [{'taskId': 't1', 'status': 'pending'}]


def test_ensure_creates_only_missing_files(tmp_store):
    assert tmp_store.ensure('rooms', [{'roomId': '101'}]) is True
    assert tmp_store.ensure('rooms', []) is False
    assert tmp_store.read('rooms') == [{'roomId': '101'}]


def test_concurrent_updates_do_not_lose_writes(tmp_store):
    tmp_store.write('cleaningTasks', [])

    def add_tasks(worker):
        for i in range(25):
            with tmp_store.update('cleaningTasks') as tasks:
                tasks.append({'taskId': f'{worker}-{i}'})

    threads = [threading.Thread(target=add_tasks, args=(w,)) for w in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = {t['taskId'] for t in tmp_store.read('cleaningTasks')}
    assert len(ids) == 100
