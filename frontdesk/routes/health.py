"""
Health check endpoints for monitoring the application and its data files.

These endpoints are used by:
- Process supervisors to determine service health
- Monitoring tools to track uptime
- Deployment smoke tests
"""

from flask import Blueprint, jsonify, current_app
from datetime import datetime, timezone
import os

from frontdesk.domain.enums import DOCUMENTS
from frontdesk.storage.errors import RecordStoreError


health_bp = Blueprint('health', __name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@health_bp.route('/health')
def health_check():
    """
    Lightweight health check.

    Returns 200 OK if the application is running.
    Does NOT touch the data files to keep response time low.
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': _now(),
        'service': 'frontdesk',
    }), 200


@health_bp.route('/health/ready')
def readiness_check():
    """
    Readiness check including the JSON data files.

    Returns 200 OK only if every data file can be read and parsed.
    """
    store = current_app.extensions['frontdesk'].store
    checks = {
        'application': 'healthy',
        'data_dir': store.data_dir,
        'documents': {},
        'timestamp': _now(),
    }

    status_code = 200
    for name in DOCUMENTS:
        try:
            count = len(store.read(name))
            checks['documents'][name] = {'status': 'healthy', 'records': count}
        except RecordStoreError as exc:
            checks['documents'][name] = {'status': 'unhealthy', 'error': str(exc)}
            status_code = 503
            current_app.logger.error('Data file check failed for %s: %s', name, exc)

    checks['overall'] = 'healthy' if status_code == 200 else 'unhealthy'

    return jsonify(checks), status_code


@health_bp.route('/health/live')
def liveness_check():
    """
    Liveness probe.

    Returns 200 OK if the process is alive.
    """
    return jsonify({
        'status': 'alive',
        'pid': os.getpid(),
        'timestamp': _now(),
    }), 200
