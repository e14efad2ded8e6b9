# backerhub/web/users.py

import logging

from flask import redirect, url_for, flash, current_app

from backerhub import services
from backerhub.auth.decorators import admin_login_required
from backerhub.errors import ValidationError
from backerhub.storage import save_upload
from backerhub.web import web_blueprint, render_page
from backerhub.web.forms import UserCreateForm, UserUpdateForm, AvatarForm

logger = logging.getLogger(__name__)

users_bp = web_blueprint('web_users', __name__)


@users_bp.route('/users', methods=['GET'])
@admin_login_required
def index():
    users = services.user_service().get_all_users()
    return render_page('user_index.html', users=users)


@users_bp.route('/users/new', methods=['GET'])
@admin_login_required
def new():
    return render_page('user_new.html', form=UserCreateForm())


@users_bp.route('/users', methods=['POST'])
@admin_login_required
def create():
    form = UserCreateForm()
    if not form.validate_on_submit():
        return render_page('user_new.html', 400, form=form)

    try:
        services.user_service().register_user(
            name=form.name.data,
            email=form.email.data,
            password=form.password.data,
            occupation=form.occupation.data,
        )
    except ValidationError as e:
        form.email.errors.append(e.message)
        return render_page('user_new.html', 400, form=form)

    flash("User created.", "success")
    return redirect(url_for('web_users.index'))


@users_bp.route('/users/edit/<int:user_id>', methods=['GET'])
@admin_login_required
def edit(user_id):
    user = services.user_service().get_user_by_id(user_id)
    return render_page('user_edit.html', user=user, form=UserUpdateForm(obj=user))


@users_bp.route('/users/update/<int:user_id>', methods=['POST'])
@admin_login_required
def update(user_id):
    user_service = services.user_service()
    user = user_service.get_user_by_id(user_id)
    form = UserUpdateForm()
    if not form.validate_on_submit():
        return render_page('user_edit.html', 400, user=user, form=form)

    try:
        user_service.update_user(user_id, form.name.data, form.email.data, form.occupation.data)
    except ValidationError as e:
        form.email.errors.append(e.message)
        return render_page('user_edit.html', 400, user=user, form=form)

    flash("User updated.", "success")
    return redirect(url_for('web_users.index'))


@users_bp.route('/users/avatar/<int:user_id>', methods=['GET'])
@admin_login_required
def new_avatar(user_id):
    user = services.user_service().get_user_by_id(user_id)
    return render_page('user_avatar.html', user=user, form=AvatarForm())


@users_bp.route('/users/avatar/<int:user_id>', methods=['POST'])
@admin_login_required
def create_avatar(user_id):
    user_service = services.user_service()
    user = user_service.get_user_by_id(user_id)
    form = AvatarForm()
    if not form.validate_on_submit():
        return render_page('user_avatar.html', 400, user=user, form=form)

    path = save_upload(form.avatar.data, current_app.config['UPLOAD_FOLDER'], user.id)
    user_service.save_avatar(user.id, path)
    flash("Avatar uploaded.", "success")
    return redirect(url_for('web_users.index'))
