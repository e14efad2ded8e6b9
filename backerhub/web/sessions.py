# backerhub/web/sessions.py

import logging

from flask import redirect, url_for, session, flash

from backerhub import services
from backerhub.auth.decorators import SESSION_USER_KEY
from backerhub.errors import ValidationError
from backerhub.web import web_blueprint, render_page
from backerhub.web.forms import LoginForm

logger = logging.getLogger(__name__)

sessions_bp = web_blueprint('web_sessions', __name__)


@sessions_bp.route('/login', methods=['GET'])
def new():
    return render_page('session_new.html', form=LoginForm())


@sessions_bp.route('/session', methods=['POST'])
def create():
    form = LoginForm()
    if not form.validate_on_submit():
        return render_page('session_new.html', 400, form=form)

    try:
        user = services.user_service().login(form.email.data, form.password.data)
    except ValidationError:
        flash("Invalid email or password.", "danger")
        return redirect(url_for('web_sessions.new'))

    if not user.is_admin:
        logger.warning(f"Non-admin user {user.id} tried to log into the admin panel")
        flash("You do not have permission to access the admin panel.", "danger")
        return redirect(url_for('web_sessions.new'))

    session[SESSION_USER_KEY] = user.id
    session['userName'] = user.name
    logger.info(f"Admin {user.id} logged in")
    return redirect(url_for('web_users.index'))


@sessions_bp.route('/logout', methods=['GET'])
def destroy():
    session.clear()
    return redirect(url_for('web_sessions.new'))
