"""
Main Blueprint - Public Pages

The landing page is the only page that does not require a login.
"""

from flask import Blueprint, render_template, current_app

# Create Blueprint
main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Public landing page"""
    return render_template('landing.html', title=f"Welcome to {current_app.config['SITE_NAME']}")
