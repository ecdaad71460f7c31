"""
Housekeeping Blueprint - Cleaning Requests

Open to every logged-in staff member: request cleaning for a room and
mark requests completed.
"""

from flask import Blueprint, render_template, redirect, url_for, flash, current_app
from flask_login import login_required

from frontdesk.domain.enums import TaskStatus
from frontdesk.forms import CleaningRequestForm, CompleteTaskForm
from frontdesk.services import get_front_desk
from frontdesk.storage.errors import RecordStoreError

# Create Blueprint
housekeeping_bp = Blueprint('housekeeping', __name__)


def _render_requests(form, status=200):
    front_desk = get_front_desk()
    rooms = front_desk.get_rooms()
    tasks = front_desk.get_cleaning_tasks()
    form.set_room_choices(rooms)
    pending = sum(1 for t in tasks if t.get('status') == TaskStatus.PENDING)
    return render_template(
        'cleaning_requests.html',
        title='Cleaning Requests',
        form=form,
        complete_form=CompleteTaskForm(),
        rooms=rooms,
        cleaning_tasks=tasks,
        pending_count=pending,
    ), status


@housekeeping_bp.route('/cleaning-requests', methods=['GET'])
@login_required
def cleaning_requests():
    """Rooms and the cleaning task list"""
    try:
        return _render_requests(CleaningRequestForm())
    except RecordStoreError as exc:
        current_app.logger.error('Cleaning requests failed to load: %s', exc, exc_info=True)
        return 'Server error', 500


@housekeeping_bp.route('/cleaning-requests', methods=['POST'])
@login_required
def request_cleaning():
    """Create a pending cleaning task"""
    form = CleaningRequestForm()
    try:
        if not form.validate_on_submit():
            return _render_requests(form, status=400)
        task = get_front_desk().add_cleaning_task(form.room.data)
    except RecordStoreError as exc:
        current_app.logger.error('Error creating cleaning request: %s', exc, exc_info=True)
        return 'Error creating cleaning request', 500

    flash(f"Cleaning requested for room {task['roomId']}.", 'success')
    return redirect(url_for('housekeeping.cleaning_requests'))


@housekeeping_bp.route('/cleaning-requests/<task_id>/complete', methods=['POST'])
@login_required
def complete_cleaning(task_id):
    """Mark a cleaning task completed; unknown ids are ignored"""
    form = CompleteTaskForm()
    if not form.validate_on_submit():
        flash('Your form expired. Please try again.', 'warning')
        return redirect(url_for('housekeeping.cleaning_requests'))

    try:
        get_front_desk().complete_cleaning_task(task_id)
    except RecordStoreError as exc:
        current_app.logger.error('Error updating cleaning task %s: %s', task_id, exc, exc_info=True)
        return 'Error updating cleaning task', 500
    return redirect(url_for('housekeeping.cleaning_requests'))
