# backerhub/auth/decorators.py

import logging
from functools import wraps

from flask import request, session, redirect, url_for

from backerhub.auth.tokens import InvalidToken
from backerhub.errors import NotFound
from backerhub.helpers import api_response
from backerhub import services

logger = logging.getLogger(__name__)

SESSION_USER_KEY = 'userID'


def _unauthorized(reason):
    logger.warning(f"API request to {request.path} rejected: {reason}")
    return api_response("Unauthorized", 401, "error")


def api_auth_required(f):
    """
    Decorator for JSON endpoints. Resolves the bearer token to a User and
    passes it to the view as ``current_user``. Any failure answers 401 with
    the error envelope and the view is never called.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get('Authorization', '')
        if 'Bearer' not in auth_header:
            return _unauthorized("missing bearer scheme")

        parts = auth_header.split()
        if len(parts) != 2:
            return _unauthorized("malformed authorization header")

        try:
            claims = services.token_service().validate_token(parts[1])
        except InvalidToken as e:
            return _unauthorized(f"invalid token ({str(e)})")

        try:
            user = services.user_service().get_user_by_id(claims.user_id)
        except NotFound:
            return _unauthorized(f"unknown user {claims.user_id}")

        return f(*args, current_user=user, **kwargs)
    return decorated_function


def admin_login_required(f):
    """
    Decorator for admin pages. Redirects to the login page when the session
    carries no user id. The referenced user is not looked up again.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if session.get(SESSION_USER_KEY) is None:
            return redirect(url_for('web_sessions.new'))
        return f(*args, **kwargs)
    return decorated_function
