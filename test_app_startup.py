import os

import pytest

from config import TestConfig
from backerhub import create_app, services
from backerhub.templating import TemplateSetupError


def write(path, content):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as f:
        f.write(content)


def test_renderer_registers_every_page_by_file_name(app):
    renderer = app.extensions[services.TEMPLATE_RENDERER]

    assert 'user_index.html' in renderer.names
    assert 'campaign_show.html' in renderer.names
    assert 'session_new.html' in renderer.names
    assert 'base.html' not in renderer.names


def test_renderer_is_built_once_and_shared(app, client, login_admin):
    renderer = app.extensions[services.TEMPLATE_RENDERER]
    login_admin()
    client.get('/users')
    client.get('/campaigns')

    assert app.extensions[services.TEMPLATE_RENDERER] is renderer


def test_startup_fails_without_layouts(tmp_path):
    write(str(tmp_path / 'users' / 'user_index.html'), 'hello')

    class NoLayouts(TestConfig):
        TEMPLATES_DIR = str(tmp_path)

    with pytest.raises(TemplateSetupError):
        create_app(NoLayouts)


def test_startup_fails_on_duplicate_page_names(tmp_path):
    write(str(tmp_path / 'layouts' / 'base.html'), '{% block content %}{% endblock %}')
    write(str(tmp_path / 'users' / 'index.html'), '{% extends "base.html" %}')
    write(str(tmp_path / 'campaigns' / 'index.html'), '{% extends "base.html" %}')

    class Duplicates(TestConfig):
        TEMPLATES_DIR = str(tmp_path)

    with pytest.raises(TemplateSetupError):
        create_app(Duplicates)


def test_startup_fails_without_database_configuration():
    class NoDatabase(TestConfig):
        SQLALCHEMY_DATABASE_URI = None

    with pytest.raises(RuntimeError):
        create_app(NoDatabase)


def test_static_mounts_serve_files_from_disk(app, client):
    css = client.get('/css/admin.css')

    assert css.status_code == 200
    assert b'font-family' in css.data
    assert client.get('/webfonts/missing.woff').status_code == 404
