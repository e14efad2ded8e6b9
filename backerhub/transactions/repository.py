from sqlalchemy import func
from sqlalchemy.orm import joinedload

from backerhub.models import Campaign, Transaction, TransactionStatus


class TransactionRepository:
    def __init__(self, session):
        self.session = session

    def find_by_campaign_id(self, campaign_id):
        return (self.session.query(Transaction)
                .options(joinedload(Transaction.user))
                .filter_by(campaign_id=campaign_id)
                .order_by(Transaction.id.desc())
                .all())

    def find_by_user_id(self, user_id):
        return (self.session.query(Transaction)
                .options(joinedload(Transaction.campaign).joinedload(Campaign.images))
                .filter_by(user_id=user_id)
                .order_by(Transaction.id.desc())
                .all())

    def find_all(self):
        return (self.session.query(Transaction)
                .options(joinedload(Transaction.campaign), joinedload(Transaction.user))
                .order_by(Transaction.id.desc())
                .all())

    def find_by_code(self, code):
        return self.session.query(Transaction).filter_by(code=code).first()

    def find_by_code_for_update(self, code):
        return (self.session.query(Transaction)
                .filter_by(code=code)
                .with_for_update()
                .populate_existing()
                .first())

    def paid_totals(self, campaign_id):
        """Returns ``(raised amount, backer count)`` over the campaign's paid transactions."""
        total, count = (self.session.query(func.coalesce(func.sum(Transaction.amount), 0),
                                           func.count(Transaction.id))
                        .filter(Transaction.campaign_id == campaign_id,
                                Transaction.status == TransactionStatus.PAID)
                        .one())
        return int(total), int(count)

    def save(self, transaction):
        self.session.add(transaction)
        self.session.commit()
        return transaction
