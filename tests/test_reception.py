"""Receptionist dashboard and guest check-in."""


def test_receptionist_login_then_dashboard_lists_rooms(client):
    resp = client.post('/login', data={'username': 'alice', 'password': 'pw'})
    assert resp.headers['Location'].endswith('/dashboard')

    resp = client.get('/dashboard')

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    for room_id in ('101', '102', '103'):
        assert room_id in body
    assert 'Existing Guest' in body


def test_checkin_form_lists_only_vacant_and_ready_rooms(client, login):
    login('alice')

    resp = client.get('/checkin')

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert 'value="101"' in body
    assert 'value="102"' in body
    assert 'value="103"' not in body


def test_checkin_records_guest_and_occupies_room(client, login, front_desk):
    login('alice')

    resp = client.post('/checkin', data={'guestName': 'Jane Doe', 'contact': '555-0100', 'room': '101'})

    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/dashboard')

    guests = front_desk.get_guests()
    assert len(guests) == 1
    assert guests[0]['name'] == 'Jane Doe'
    assert guests[0]['contact'] == '555-0100'
    assert guests[0]['roomId'] == '101'

    room = next(r for r in front_desk.get_rooms() if r['roomId'] == '101')
    assert room['status'] == 'occupied'
    assert room['assignedGuest'] == {'name': 'Jane Doe'}

    assert 'Jane Doe' in client.get('/dashboard').get_data(as_text=True)


def test_checkin_to_unknown_room_still_adds_guest(client, login, front_desk):
    login('alice')
    rooms_before = front_desk.get_rooms()

    resp = client.post('/checkin', data={'guestName': 'Walk In', 'contact': '', 'room': '999'})

    assert resp.status_code == 302
    assert [g['roomId'] for g in front_desk.get_guests()] == ['999']
    assert front_desk.get_rooms() == rooms_before


def test_checkin_without_guest_name_is_rejected(client, login, front_desk):
    login('alice')

    resp = client.post('/checkin', data={'guestName': '  ', 'contact': '', 'room': '101'})

    assert resp.status_code == 400
    assert front_desk.get_guests() == []


def test_housekeeping_cannot_check_in(client, login, front_desk):
    login('bob')

    resp = client.post('/checkin', data={'guestName': 'Sneaky', 'contact': '', 'room': '101'})

    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/login')
    assert front_desk.get_guests() == []


def test_dashboard_with_corrupt_rooms_file_is_a_500(client, login, data_dir):
    login('alice')
    (data_dir / 'rooms.json').write_text('{"rooms": ', encoding='utf-8')

    resp = client.get('/dashboard')

    assert resp.status_code == 500


def test_checkin_with_missing_guests_file_is_a_500(client, login, data_dir):
    login('alice')
    (data_dir / 'guests.json').unlink()

    resp = client.post('/checkin', data={'guestName': 'Jane', 'contact': '', 'room': '101'})

    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == 'Check-In failed'


def test_checkin_stores_name_and_contact_as_posted(client, login, front_desk):
    login('alice')

    resp = client.post('/checkin', data={'guestName': '  Jane Doe ', 'contact': ' 555-0100 ', 'room': '102'})

    assert resp.status_code == 302
    guest = front_desk.get_guests()[0]
    assert guest['name'] == '  Jane Doe '
    assert guest['contact'] == ' 555-0100 '
    room = next(r for r in front_desk.get_rooms() if r['roomId'] == '102')
    assert room['assignedGuest'] == {'name': '  Jane Doe '}


def test_checkin_post_with_corrupt_rooms_file_reports_check_in_failure(client, login, data_dir):
    login('alice')
    (data_dir / 'rooms.json').write_text('{"rooms": ', encoding='utf-8')

    get_resp = client.get('/checkin')
    post_resp = client.post('/checkin', data={'guestName': 'Jane', 'contact': '', 'room': '101'})

    assert get_resp.status_code == 500
    assert get_resp.get_data(as_text=True) == 'Server error'
    assert post_resp.status_code == 500
    assert post_resp.get_data(as_text=True) == 'Check-In failed'
