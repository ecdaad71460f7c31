"""
Reception Blueprint - Room Status and Guest Check-In

Receptionist-only pages:
- /dashboard lists every room with its status and assigned guest
- /checkin records a guest and marks their room occupied
"""

from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app

from frontdesk.domain.enums import Role
from frontdesk.forms import CheckInForm
from frontdesk.routes.auth import role_required
from frontdesk.services import get_front_desk
from frontdesk.storage.errors import RecordStoreError

# Create Blueprint
reception_bp = Blueprint('reception', __name__)


@reception_bp.route('/dashboard')
@role_required(Role.RECEPTIONIST)
def dashboard():
    """Room status board"""
    try:
        rooms = get_front_desk().get_rooms()
    except RecordStoreError as exc:
        current_app.logger.error('Dashboard failed to load rooms: %s', exc, exc_info=True)
        return 'Server error', 500
    return render_template('dashboard.html', title='Reception Dashboard', rooms=rooms)


@reception_bp.route('/checkin', methods=['GET', 'POST'])
@role_required(Role.RECEPTIONIST)
def checkin():
    """Check a guest into a vacant or ready room"""

    front_desk = get_front_desk()
    form = CheckInForm()

    try:
        available_rooms = front_desk.available_rooms()
    except RecordStoreError as exc:
        current_app.logger.error('Check-in failed to load rooms: %s', exc, exc_info=True)
        if request.method == 'POST':
            return 'Check-In failed', 500
        return 'Server error', 500
    form.set_room_choices(available_rooms)

    if form.is_submitted() and not form.validate():
        return render_template(
            'checkin.html', title='Check-In Guests', form=form, available_rooms=available_rooms
        ), 400

    if form.is_submitted():
        try:
            guest = front_desk.check_in_guest(
                name=form.guest_name.data,
                contact=form.contact.data or '',
                room_id=form.room.data,
            )
        except RecordStoreError as exc:
            current_app.logger.error('Check-in failed: %s', exc, exc_info=True)
            return 'Check-In failed', 500
        flash(f"{guest['name']} checked into room {guest['roomId']}.", 'success')
        return redirect(url_for('reception.dashboard'))

    return render_template('checkin.html', title='Check-In Guests', form=form, available_rooms=available_rooms)
