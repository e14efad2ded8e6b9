# backerhub/api/users.py

import logging

from flask import request, current_app

from backerhub import services
from backerhub.api import api_bp, json_payload, failure_message
from backerhub.auth.decorators import api_auth_required
from backerhub.errors import ValidationError
from backerhub.helpers import api_response, format_form_errors
from backerhub.storage import save_upload
from backerhub.users.formatter import format_user
from backerhub.users.inputs import RegisterUserInput, LoginInput, CheckEmailInput

logger = logging.getLogger(__name__)


@api_bp.route('/users', methods=['POST'])
def register_user():
    form = RegisterUserInput(json_payload("Register account failed"))
    if not form.validate():
        raise ValidationError("Register account failed", errors=format_form_errors(form), code=422)

    with failure_message("Register account failed"):
        user = services.user_service().register_user(
            name=form.name.data,
            email=form.email.data,
            password=form.password.data,
            occupation=form.occupation.data or None,
        )

    token = services.token_service().generate_token(user.id)
    return api_response("Account has been registered", 200, "success", format_user(user, token))


@api_bp.route('/sessions', methods=['POST'])
def login():
    form = LoginInput(json_payload("Login failed"))
    if not form.validate():
        raise ValidationError("Login failed", errors=format_form_errors(form), code=422)

    try:
        user = services.user_service().login(form.email.data, form.password.data)
    except ValidationError as e:
        raise ValidationError("Login failed", errors=[e.message], code=422) from e

    token = services.token_service().generate_token(user.id)
    return api_response("Successfully logged in", 200, "success", format_user(user, token))


@api_bp.route('/email_checkers', methods=['POST'])
def check_email_availability():
    form = CheckEmailInput(json_payload("Email checking failed"))
    if not form.validate():
        raise ValidationError("Email checking failed", errors=format_form_errors(form), code=422)

    is_available = services.user_service().is_email_available(form.email.data)
    message = "Email is available" if is_available else "Email has been registered"
    return api_response(message, 200, "success", {"is_available": is_available})


@api_bp.route('/avatars', methods=['POST'])
@api_auth_required
def upload_avatar(current_user):
    avatar = request.files.get('avatar')
    try:
        path = save_upload(avatar, current_app.config['UPLOAD_FOLDER'], current_user.id)
    except ValidationError as e:
        logger.warning(f"Avatar upload rejected for user {current_user.id}: {e.message}")
        return api_response("Failed to upload avatar image", 400, "error", {"is_uploaded": False})

    services.user_service().save_avatar(current_user.id, path)
    return api_response("Avatar successfully uploaded", 200, "success", {"is_uploaded": True})


@api_bp.route('/users/fetch', methods=['GET'])
@api_auth_required
def fetch_user(current_user):
    return api_response("Successfully fetched user data", 200, "success", format_user(current_user))
