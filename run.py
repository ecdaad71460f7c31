"""Development server.

Creates missing data files, then serves the app on $HOST:$PORT
(default 0.0.0.0:3000).
"""

import os

from wsgi import app


def _ensure_data_files() -> None:
    from frontdesk.domain.enums import DOCUMENTS

    store = app.extensions['frontdesk'].store
    for name in DOCUMENTS:
        if store.ensure(name):
            app.logger.warning('Created empty data file %s', store.path_for(name))


if __name__ == '__main__':
    _ensure_data_files()

    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 3000))
    app.run(host=host, port=port)
