# backerhub/__init__.py

import os
import logging
from flask import Flask, request, send_from_directory
from config import Config
from database import init_db

# Set up logging for debugging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Credentials': 'true',
    'Access-Control-Allow-Headers': 'Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, '
                                    'Authorization, accept, origin, Cache-Control, X-Requested-With',
    'Access-Control-Allow-Methods': 'POST, HEAD, PATCH, OPTIONS, GET, PUT',
}


def _register_static_mounts(app):
    def make_view(directory):
        def serve(filename):
            return send_from_directory(directory, filename)
        return serve

    for prefix, directory in app.config['STATIC_MOUNTS'].items():
        if not os.path.isabs(directory):
            directory = os.path.join(PROJECT_ROOT, directory)
        app.add_url_rule(f'/{prefix}/<path:filename>', endpoint=f'static_{prefix}', view_func=make_view(directory))
        logger.info(f"Serving /{prefix} from {directory}")


def create_app(config_class=Config, payment_gateway=None):
    try:
        logger.info("Starting Flask app creation...")

        # static files are served through the explicit mounts below
        app = Flask(__name__, static_folder=None)
        app.config.from_object(config_class)
        logger.info("Flask app instance created successfully")

        if not app.config.get('SQLALCHEMY_DATABASE_URI'):
            raise RuntimeError("Database is not configured: set DATABASE_URL or DB_HOST/DB_NAME")

        upload_folder = app.config['UPLOAD_FOLDER']
        if not os.path.isabs(upload_folder):
            app.config['UPLOAD_FOLDER'] = os.path.join(PROJECT_ROOT, upload_folder)

        init_db(app)
        logger.info("Database initialized with Flask app")

        from backerhub import services
        from backerhub.auth.tokens import TokenService
        from backerhub.payment.gateway import PaymentGateway
        from backerhub.templating import TemplateRenderer

        app.extensions[services.TOKEN_SERVICE] = TokenService.from_config(app.config)
        app.extensions[services.PAYMENT_GATEWAY] = payment_gateway or PaymentGateway.from_config(app.config)

        template_dir = app.config.get('TEMPLATES_DIR') or os.path.join(PROJECT_ROOT, 'templates')
        logger.info(f"Template dir: {template_dir}")
        app.extensions[services.TEMPLATE_RENDERER] = TemplateRenderer(app.jinja_env, template_dir)

        @app.before_request
        def short_circuit_preflight():
            # runs ahead of routing and both auth gates
            if request.method == 'OPTIONS':
                return '', 204

        @app.after_request
        def add_cors_headers(response):
            for header, value in CORS_HEADERS.items():
                response.headers[header] = value
            return response

        _register_static_mounts(app)

        # Register Blueprints
        logger.info("Registering blueprints...")
        try:
            from backerhub.api import api_bp
            from backerhub.web import register_web_blueprints

            app.register_blueprint(api_bp)
            register_web_blueprints(app)
            logger.info("All blueprints registered successfully")
        except Exception as e:
            logger.error(f"Failed to register blueprints: {str(e)}")
            raise

        @app.context_processor
        def inject_globals():
            from flask import session
            return dict(current_admin_name=session.get('userName'))

        logger.info("Flask app creation completed successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create Flask app: {str(e)}")
        logger.error(f"Error type: {type(e).__name__}")
        raise
