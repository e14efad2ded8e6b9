import logging
from uuid import uuid4

from database import transaction_scope
from backerhub.errors import Forbidden, NotFound
from backerhub.models import Transaction, TransactionStatus
from backerhub.payment.gateway import resolve_status

logger = logging.getLogger(__name__)


def generate_code():
    return f"TRX-{uuid4().hex[:12].upper()}"


class TransactionService:
    def __init__(self, repository, campaign_repository, payment_gateway):
        self.repository = repository
        self.campaign_repository = campaign_repository
        self.payment_gateway = payment_gateway

    def get_transactions_by_campaign_id(self, campaign_id, user_id):
        campaign = self.campaign_repository.find_by_id(campaign_id)
        if campaign is None:
            raise NotFound("Campaign not found")
        if campaign.user_id != user_id:
            logger.warning(f"User {user_id} is not the owner of campaign {campaign_id}")
            raise Forbidden("Not an owner of the campaign")
        return self.repository.find_by_campaign_id(campaign_id)

    def get_transactions_by_user_id(self, user_id):
        return self.repository.find_by_user_id(user_id)

    def get_all_transactions(self):
        return self.repository.find_all()

    def create_transaction(self, user, campaign_id, amount):
        campaign = self.campaign_repository.find_by_id(campaign_id)
        if campaign is None:
            raise NotFound("Campaign not found")

        transaction = Transaction(
            campaign_id=campaign.id,
            user_id=user.id,
            amount=amount,
            status=TransactionStatus.PENDING,
            code=generate_code(),
        )
        transaction.payment_url = self.payment_gateway.get_payment_url(transaction, user)
        self.repository.save(transaction)
        logger.info(f"Created pending transaction {transaction.code} of {amount} for campaign {campaign.id}")
        return transaction

    def process_payment(self, code, transaction_status, payment_type=None, fraud_status=None):
        """
        Applies a gateway notification. The status change and the campaign's
        raised total are written in one DB transaction holding row locks on
        the campaign and the transaction.
        """
        transaction = self.repository.find_by_code(code)
        if transaction is None:
            raise NotFound("Transaction not found")

        new_status = resolve_status(transaction_status, payment_type, fraud_status)
        if new_status is None:
            logger.info(f"Notification '{transaction_status}' for {code} leaves the status unchanged")
            return transaction

        session = self.repository.session
        with transaction_scope(session):
            # campaign row first, then the transaction row
            campaign = self.campaign_repository.find_for_update(transaction.campaign_id)
            transaction = self.repository.find_by_code_for_update(code)
            transaction.status = new_status
            session.flush()
            self._apply_totals(campaign)

        logger.info(f"Transaction {code} is now {new_status}; campaign {campaign.id} raised {campaign.current_amount}")
        return transaction

    def _apply_totals(self, campaign):
        total, backers = self.repository.paid_totals(campaign.id)
        campaign.current_amount = total
        campaign.backer_count = backers
