# config.py

import os


def _database_url():
    url = os.environ.get('DATABASE_URL')
    if url:
        return url

    host = os.environ.get('DB_HOST')
    name = os.environ.get('DB_NAME')
    if not host or not name:
        return None

    user = os.environ.get('DB_USER', 'postgres')
    password = os.environ.get('DB_PASSWORD', '')
    port = os.environ.get('DB_PORT', '5432')
    return f"postgresql://{user}:{password}@{host}:{port}/{name}"


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a_very_secret_key_for_development'

    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ALGORITHM = 'HS256'
    # 0 issues tokens without an exp claim
    JWT_EXPIRES_SECONDS = int(os.environ.get('JWT_EXPIRES_SECONDS', 7 * 24 * 3600))

    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    PAYMENT_SERVER_KEY = os.environ.get('PAYMENT_SERVER_KEY', '')
    PAYMENT_API_URL = os.environ.get('PAYMENT_API_URL', 'https://app.sandbox.midtrans.com/snap/v1/transactions')
    PAYMENT_TIMEOUT = float(os.environ.get('PAYMENT_TIMEOUT', 10))

    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', 'images')
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_UPLOAD_SIZE_MB', 16)) * 1024 * 1024

    # url prefix -> directory, relative to the project root
    STATIC_MOUNTS = {
        'images': UPLOAD_FOLDER,
        'css': os.path.join('web', 'assets', 'css'),
        'js': os.path.join('web', 'assets', 'js'),
        'webfonts': os.path.join('web', 'assets', 'webfonts'),
    }

    DEBUG = os.environ.get('FLASK_DEBUG') == '1'

    SESSION_COOKIE_NAME = 'backerhub'
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    WTF_CSRF_ENABLED = False
    SESSION_COOKIE_SECURE = False
    JWT_SECRET_KEY = 'test-jwt-secret'
    SECRET_KEY = 'test-secret'
