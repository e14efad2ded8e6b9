# backerhub/api/transactions.py

import logging

from backerhub import services
from backerhub.api import api_bp, json_payload, failure_message
from backerhub.auth.decorators import api_auth_required
from backerhub.errors import ValidationError
from backerhub.helpers import api_response, format_form_errors
from backerhub.transactions.formatter import (
    format_campaign_transactions,
    format_user_transactions,
    format_transaction,
)
from backerhub.transactions.inputs import CreateTransactionInput, TransactionNotificationInput

logger = logging.getLogger(__name__)


@api_bp.route('/campaigns/<int:campaign_id>/transactions', methods=['GET'])
@api_auth_required
def get_campaign_transactions(campaign_id, current_user):
    with failure_message("Failed to get campaign's transactions"):
        transactions = services.transaction_service().get_transactions_by_campaign_id(campaign_id, current_user.id)
    return api_response("Campaign's transactions", 200, "success", format_campaign_transactions(transactions))


@api_bp.route('/transactions', methods=['GET'])
@api_auth_required
def get_user_transactions(current_user):
    transactions = services.transaction_service().get_transactions_by_user_id(current_user.id)
    return api_response("User's transactions", 200, "success", format_user_transactions(transactions))


@api_bp.route('/transactions', methods=['POST'])
@api_auth_required
def create_transaction(current_user):
    form = CreateTransactionInput(json_payload("Failed to create transaction"))
    if not form.validate():
        raise ValidationError("Failed to create transaction", errors=format_form_errors(form), code=422)

    with failure_message("Failed to create transaction"):
        transaction = services.transaction_service().create_transaction(
            current_user, form.campaign_id.data, form.amount.data)
    return api_response("Success to create transaction", 200, "success", format_transaction(transaction))


@api_bp.route('/transactions/notification', methods=['POST'])
def get_notification():
    form = TransactionNotificationInput(json_payload("Failed to process notification"))
    if not form.validate():
        raise ValidationError("Failed to process notification", errors=format_form_errors(form))

    with failure_message("Failed to process notification"):
        transaction = services.transaction_service().process_payment(
            form.order_id.data,
            form.transaction_status.data,
            payment_type=form.payment_type.data,
            fraud_status=form.fraud_status.data,
        )
    return api_response("Notification processed", 200, "success",
                        {"order_id": transaction.code, "status": transaction.status})
