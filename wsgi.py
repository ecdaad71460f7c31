"""
WSGI Entry Point for the Front Desk Application

This module serves as the entry point for WSGI servers (like Gunicorn)
and for the Flask CLI (``flask --app wsgi seed-data``).

Environment:
- FLASK_CONFIG: development (default), production or testing
- SECRET_KEY: required in production
- FRONTDESK_DATA_DIR: directory holding the JSON data files
"""

import os
import sys

# Load .env ONLY for local development. In production, environment
# variables must be provided by the platform. Never rely on a committed file.
if os.environ.get('FLASK_CONFIG', '').lower() != 'production':
    from dotenv import load_dotenv

    load_dotenv(override=False)

from frontdesk import create_app

config_name = (os.getenv('FLASK_CONFIG') or 'development').lower()

print(f'Initializing front desk application with config: {config_name}', file=sys.stderr)

# Validate required environment variables in production
if config_name == 'production':
    required_vars = {
        'SECRET_KEY': 'Required for session id signing and CSRF protection',
    }

    missing_vars = [
        f'  {name}: {description}'
        for name, description in required_vars.items()
        if not os.getenv(name)
    ]
    if missing_vars:
        print(
            'Missing required environment variables:\n' + '\n'.join(missing_vars),
            file=sys.stderr,
        )
        raise RuntimeError('Missing required environment variables in production')

app = create_app(config_name)
