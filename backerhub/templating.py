# backerhub/templating.py

import glob
import logging
import os

from flask import current_app
from jinja2 import FileSystemLoader

logger = logging.getLogger(__name__)


class TemplateSetupError(RuntimeError):
    pass


class TemplateRenderer:
    """
    Page renderer for the admin UI, built once at startup.

    Every page under ``<templates_dir>/<section>/*.html`` is compiled together
    with the layouts in ``<templates_dir>/layouts`` and registered under its
    file name (``user_index.html``). Problems with the template set surface
    here, while the app is being created, instead of on the first request.
    """

    def __init__(self, jinja_env, templates_dir):
        self.templates_dir = os.path.abspath(templates_dir)
        layouts_dir = os.path.join(self.templates_dir, 'layouts')

        layouts = sorted(glob.glob(os.path.join(layouts_dir, '*.html')))
        if not layouts:
            raise TemplateSetupError(f"No layout templates found in {layouts_dir}")

        includes = sorted(
            path for path in glob.glob(os.path.join(self.templates_dir, '*', '*.html'))
            if os.path.dirname(path) != layouts_dir
        )

        # overlay keeps Flask's globals (url_for, get_flashed_messages)
        self._env = jinja_env.overlay(loader=FileSystemLoader([layouts_dir, self.templates_dir]))
        self._templates = {}
        for include in includes:
            name = os.path.basename(include)
            if name in self._templates:
                raise TemplateSetupError(f"Duplicate page template name: {name}")
            relative = os.path.relpath(include, self.templates_dir).replace(os.sep, '/')
            self._templates[name] = self._env.get_template(relative)

        logger.info(f"Loaded {len(self._templates)} page templates with {len(layouts)} layouts from {self.templates_dir}")

    @property
    def names(self):
        return sorted(self._templates)

    def render(self, name, **context):
        try:
            template = self._templates[name]
        except KeyError:
            raise TemplateSetupError(f"Unknown page template: {name}") from None
        current_app.update_template_context(context)
        return template.render(context)
