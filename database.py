# database.py

import logging
from contextlib import contextmanager

from flask_sqlalchemy import SQLAlchemy

logger = logging.getLogger(__name__)

# Initialize SQLAlchemy without an app yet. create_app calls init_db.
db = SQLAlchemy()


def init_db(app):
    """
    Binds the SQLAlchemy object to the app and creates the tables defined by
    the models if they don't exist yet.
    """
    db.init_app(app)

    # Import models so they are registered on the metadata before create_all
    from backerhub import models  # noqa: F401

    with app.app_context():
        logger.info(f"Ensuring tables at {db.engine.url.render_as_string(hide_password=True)}...")
        db.create_all()
        logger.info("Tables ensured.")


@contextmanager
def transaction_scope(session):
    """
    Commits the session when the block exits cleanly and rolls it back on any
    exception, which is re-raised.
    """
    try:
        yield session
        session.commit()
    except Exception as e:
        logger.error(f"Database transaction rolled back: {str(e)}")
        logger.error(f"Error type: {type(e).__name__}")
        session.rollback()
        raise
