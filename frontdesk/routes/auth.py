"""
Authentication Blueprint - Staff Login Routes

This blueprint handles:
- Login (plaintext credential check against users.json)
- Logout
- The ``role_required`` decorator used by the staff pages
"""

from functools import wraps

from flask import Blueprint, Response, render_template, redirect, url_for, flash, request, session, current_app
from flask_login import login_user, logout_user, current_user

from frontdesk.domain.enums import ROLE_HOME_ENDPOINTS
from frontdesk.extensions import limiter
from frontdesk.forms import LoginForm
from frontdesk.models import StaffUser
from frontdesk.services import get_front_desk
from frontdesk.storage.errors import RecordStoreError

# Create Blueprint
auth_bp = Blueprint('auth', __name__)


def home_url_for(role):
    """Where a user with ``role`` lands after logging in."""
    return url_for(ROLE_HOME_ENDPOINTS.get(role, 'main.index'))


def role_required(*roles):
    """Decorator to require a logged-in user whose session role is one of ``roles``.

    Anonymous users and users with another role are sent to the login page.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not current_user.is_authenticated:
                return current_app.login_manager.unauthorized()
            if session.get('role') not in roles:
                flash('Your role does not have access to that page.', 'warning')
                return redirect(url_for('auth.login'))
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def _login_rate_limit():
    return current_app.config.get('LOGIN_RATE_LIMIT', '10 per minute')


@auth_bp.route('/login', methods=['GET', 'POST'])
@limiter.limit(_login_rate_limit, methods=['POST'])
def login():
    """Staff login"""

    form = LoginForm()

    if request.method == 'GET':
        if current_user.is_authenticated:
            return redirect(home_url_for(session.get('role')))
        return render_template('login.html', title='Login', form=form)

    if not form.validate_on_submit():
        if form.errors.get('csrf_token'):
            current_app.logger.warning(
                'Login rejected: CSRF token missing or invalid (%s)', '; '.join(form.errors['csrf_token'])
            )
        return Response('Invalid credentials', status=401, mimetype='text/plain')

    username = form.username.data
    try:
        record = get_front_desk().find_user(username, form.password.data)
    except RecordStoreError as exc:
        current_app.logger.error('Login error: %s', exc, exc_info=True)
        return Response('Internal server error', status=500, mimetype='text/plain')

    if record is None:
        current_app.logger.info('Failed login for %r', username)
        return Response('Invalid credentials', status=401, mimetype='text/plain')

    current_app.session_interface.regenerate(session)
    login_user(StaffUser(record))
    session['user_id'] = record.get('userId')
    session['role'] = record.get('role')
    session.permanent = True

    current_app.logger.info('User %r logged in as %s', username, record.get('role'))
    return redirect(home_url_for(record.get('role')))


@auth_bp.route('/logout')
def logout():
    """Destroy the session and return to the landing page"""

    logout_user()
    session.clear()
    return redirect(url_for('main.index'))
