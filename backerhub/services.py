# backerhub/services.py
#
# Wiring between the request-scoped database session and the service layer.
# App-wide objects (token service, payment gateway, template renderer) are
# built once in create_app and kept in app.extensions.

from flask import current_app

from database import db
from backerhub.users.repository import UserRepository
from backerhub.users.service import UserService
from backerhub.campaigns.repository import CampaignRepository
from backerhub.campaigns.service import CampaignService
from backerhub.transactions.repository import TransactionRepository
from backerhub.transactions.service import TransactionService

TOKEN_SERVICE = 'backerhub.token_service'
PAYMENT_GATEWAY = 'backerhub.payment_gateway'
TEMPLATE_RENDERER = 'backerhub.template_renderer'


def token_service():
    return current_app.extensions[TOKEN_SERVICE]


def payment_gateway():
    return current_app.extensions[PAYMENT_GATEWAY]


def template_renderer():
    return current_app.extensions[TEMPLATE_RENDERER]


def user_service():
    return UserService(UserRepository(db.session))


def campaign_service():
    return CampaignService(CampaignRepository(db.session))


def transaction_service():
    return TransactionService(
        TransactionRepository(db.session),
        CampaignRepository(db.session),
        payment_gateway(),
    )
