"""
WTForms Form Classes for the Front Desk Application

Field names match the ones posted by the front desk pages
(``guestName``, ``contact``, ``room``), so the Python attribute names and
the HTML names differ in places.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SelectField, SubmitField
from wtforms.validators import DataRequired, Length, Optional


class LoginForm(FlaskForm):
    """Staff login form"""

    username = StringField('Username', validators=[
        DataRequired(message='Username is required')
    ])
    password = PasswordField('Password', validators=[
        DataRequired(message='Password is required')
    ])
    submit = SubmitField('Log In')


class CheckInForm(FlaskForm):
    """Guest check-in form.

    The room list is filled in by the view. Choices are not enforced so a
    posted room id is passed through to the check-in operation as is.
    """

    guest_name = StringField('Guest name', name='guestName', validators=[
        DataRequired(message='Guest name is required'),
        Length(max=200, message='Must be 200 characters or less')
    ])
    contact = StringField('Contact', validators=[
        Optional(),
        Length(max=200, message='Must be 200 characters or less')
    ])
    room = SelectField('Room', choices=[], validate_choice=False, validators=[
        DataRequired(message='Please choose a room')
    ])
    submit = SubmitField('Check In')

    def set_room_choices(self, rooms):
        self.room.choices = [(r.get('roomId'), _room_label(r)) for r in rooms]


class CleaningRequestForm(FlaskForm):
    """Request cleaning for a room."""

    room = SelectField('Room', choices=[], validate_choice=False, validators=[
        DataRequired(message='Please choose a room')
    ])
    submit = SubmitField('Request Cleaning')

    def set_room_choices(self, rooms):
        self.room.choices = [(r.get('roomId'), _room_label(r)) for r in rooms]


class CompleteTaskForm(FlaskForm):
    """CSRF-only form behind each "mark completed" button."""

    submit = SubmitField('Mark Completed')


def _room_label(room: dict) -> str:
    label = f"Room {room.get('roomId')}"
    if room.get('type'):
        label += f" ({room['type']})"
    return label
