# backerhub/api/__init__.py

import logging
from contextlib import contextmanager

from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.datastructures import MultiDict
from werkzeug.exceptions import HTTPException

from database import db
from backerhub.errors import AppError, InternalError, ValidationError
from backerhub.helpers import api_response

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api/v1')

SCALAR_TYPES = (str, int, float)


def json_payload(message):
    """
    Reads the JSON body as form data for a WTForms input, so values are
    coerced and validated the same way as a posted form. The body must be a
    JSON object whose values are strings, numbers, booleans or null.
    """
    if not request.get_data():
        return MultiDict()

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        logger.warning(f"{request.method} {request.path} rejected: body is not a JSON object")
        raise ValidationError(message, errors=["body: must be a JSON object"])

    formdata = MultiDict()
    errors = []
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, bool):
            formdata[key] = 'true' if value else 'false'
        elif isinstance(value, SCALAR_TYPES):
            formdata[key] = str(value)
        else:
            errors.append(f"{key}: must be a string or a number")

    if errors:
        raise ValidationError(message, errors=errors)
    return formdata


@contextmanager
def failure_message(message):
    """
    Re-raises client errors from the service layer under the handler's fixed
    message, keeping the service message in ``errors``.
    """
    try:
        yield
    except InternalError:
        raise
    except AppError as e:
        raise type(e)(message, errors=[e.message], code=e.code) from e


@api_bp.errorhandler(AppError)
def handle_app_error(e):
    if e.code >= 500:
        logger.error(f"{request.method} {request.path} failed: {e.message}")
        logger.error(f"Error type: {type(e).__name__}")
        return api_response("Internal server error", e.code, "error")

    data = {"errors": e.errors} if e.errors else None
    return api_response(e.message, e.code, "error", data)


@api_bp.errorhandler(SQLAlchemyError)
def handle_database_error(e):
    db.session.rollback()
    logger.error(f"{request.method} {request.path} database error: {str(e)}")
    logger.error(f"Error type: {type(e).__name__}")
    return api_response("Internal server error", 500, "error")


@api_bp.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.error(f"{request.method} {request.path} unexpected error: {str(e)}")
    logger.error(f"Error type: {type(e).__name__}")
    return api_response("Internal server error", 500, "error")


from . import users, campaigns, transactions  # noqa: E402,F401
