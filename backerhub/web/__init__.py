# backerhub/web/__init__.py

import logging

from flask import Blueprint
from sqlalchemy.exc import SQLAlchemyError

from database import db
from backerhub import services
from backerhub.errors import AppError

logger = logging.getLogger(__name__)


def render_page(name, status=200, **context):
    return services.template_renderer().render(name, **context), status


def handle_app_error(e):
    if e.code >= 500:
        logger.error(f"Admin page failed: {e.message}")
        logger.error(f"Error type: {type(e).__name__}")
        return render_page('error.html', 500, message="Something went wrong.")
    return render_page('error.html', e.code, message=e.message)


def handle_database_error(e):
    db.session.rollback()
    logger.error(f"Admin page database error: {str(e)}")
    logger.error(f"Error type: {type(e).__name__}")
    return render_page('error.html', 500, message="Something went wrong.")


def register_web_blueprints(app):
    from .sessions import sessions_bp
    from .users import users_bp
    from .campaigns import campaigns_bp
    from .transactions import transactions_bp

    for blueprint in (sessions_bp, users_bp, campaigns_bp, transactions_bp):
        app.register_blueprint(blueprint)


def web_blueprint(name, import_name):
    """Creates an admin blueprint that answers errors with the error page."""
    blueprint = Blueprint(name, import_name)
    blueprint.register_error_handler(AppError, handle_app_error)
    blueprint.register_error_handler(SQLAlchemyError, handle_database_error)
    return blueprint
