# conftest.py

import pytest

from config import TestConfig
from database import db
from backerhub import create_app, services
from backerhub.models import User, Campaign
from backerhub.payment.gateway import PaymentGatewayError


class FakePaymentGateway:
    """Stands in for the hosted payment page; records every payment it was asked for."""

    def __init__(self):
        self.requests = []
        self.fail = False

    def get_payment_url(self, transaction, user):
        if self.fail:
            raise PaymentGatewayError("Failed to create payment")
        self.requests.append((transaction.code, transaction.amount, user.id))
        return f"https://pay.backerhub.test/{transaction.code}"


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def app(tmp_path, gateway):
    app = create_app(TestConfig, payment_gateway=gateway)
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user():
    def _make_user(name='Jane Backer', email='jane@backerhub.io', password='secret123', role='user', occupation='Engineer'):
        user = User(name=name, email=email, occupation=occupation, role=role)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_campaign():
    def _make_campaign(user, name='Solar Kiosk', goal_amount=1000, perks='Sticker, T-shirt'):
        campaign = Campaign(
            user_id=user.id,
            name=name,
            short_description='Short description',
            description='Long description',
            goal_amount=goal_amount,
            perks=perks,
            slug=f"{name.lower().replace(' ', '-')}-{user.id}",
        )
        db.session.add(campaign)
        db.session.commit()
        return campaign
    return _make_campaign


@pytest.fixture
def auth_headers(app):
    def _auth_headers(user):
        token = app.extensions[services.TOKEN_SERVICE].generate_token(user.id)
        return {'Authorization': f'Bearer {token}'}
    return _auth_headers


@pytest.fixture
def login_admin(client, make_user):
    def _login_admin(email='admin@backerhub.io', password='admin-pass'):
        make_user(name='Site Admin', email=email, password=password, role='admin')
        return client.post('/session', data={'email': email, 'password': password})
    return _login_admin
