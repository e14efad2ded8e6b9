# backerhub/payment/gateway.py

import logging

import requests

from backerhub.errors import InternalError
from backerhub.models import TransactionStatus

logger = logging.getLogger(__name__)


class PaymentGatewayError(InternalError):
    pass


class PaymentGateway:
    """
    Snap-style payment gateway client. One call creates a payment for a
    transaction and returns the URL the backer is redirected to; the result
    arrives later on the notification webhook.
    """

    def __init__(self, server_key, api_url, timeout=10):
        self.server_key = server_key
        self.api_url = api_url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            config.get("PAYMENT_SERVER_KEY", ""),
            config["PAYMENT_API_URL"],
            timeout=config.get("PAYMENT_TIMEOUT", 10),
        )

    def get_payment_url(self, transaction, user):
        payload = {
            "transaction_details": {
                "order_id": transaction.code,
                "gross_amount": transaction.amount,
            },
            "customer_details": {
                "email": user.email,
                "first_name": user.name,
            },
        }

        logger.info(f"Creating payment for order {transaction.code} at {self.api_url}")
        try:
            response = requests.post(
                self.api_url,
                json=payload,
                auth=(self.server_key, ""),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Payment gateway unreachable for order {transaction.code}: {str(e)}")
            raise PaymentGatewayError("Failed to create payment") from e

        if response.status_code not in (200, 201):
            logger.error(f"Payment gateway refused order {transaction.code}: {response.status_code} {response.text}")
            raise PaymentGatewayError("Failed to create payment")

        redirect_url = response.json().get("redirect_url")
        if not redirect_url:
            logger.error(f"Payment gateway returned no redirect_url for order {transaction.code}")
            raise PaymentGatewayError("Failed to create payment")
        return redirect_url


def resolve_status(transaction_status, payment_type=None, fraud_status=None):
    """
    Maps a gateway notification onto a TransactionStatus. Returns None for
    notification states that leave the transaction untouched.
    """
    if transaction_status == "capture":
        if payment_type == "credit_card" and fraud_status == "accept":
            return TransactionStatus.PAID
        if fraud_status == "deny":
            return TransactionStatus.FAILED
        return None
    if transaction_status == "settlement":
        return TransactionStatus.PAID
    if transaction_status in ("deny", "failure"):
        return TransactionStatus.FAILED
    if transaction_status in ("cancel", "expire"):
        return TransactionStatus.CANCELED
    if transaction_status == "pending":
        return TransactionStatus.PENDING
    return None
