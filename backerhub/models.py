from database import db
from werkzeug.security import generate_password_hash, check_password_hash
from sqlalchemy.orm import relationship
from datetime import datetime


class TransactionStatus:
    PENDING = 'pending'
    PAID = 'paid'
    FAILED = 'failed'
    CANCELED = 'canceled'

    ALL = (PENDING, PAID, FAILED, CANCELED)


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    occupation = db.Column(db.String(128))
    email = db.Column(db.String(120), index=True, unique=True, nullable=False)
    password_hash = db.Column(db.String(255))
    avatar_file_name = db.Column(db.String(255))
    role = db.Column(db.String(16), nullable=False, default='user')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    campaigns = relationship('Campaign', back_populates='user', lazy=True)
    transactions = relationship('Transaction', back_populates='user', lazy=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if self.password_hash is None:
            return False
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == 'admin'

    def __repr__(self):
        return f'<User {self.email}>'


class Campaign(db.Model):
    __tablename__ = 'campaigns'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    short_description = db.Column(db.String(255))
    description = db.Column(db.Text)
    perks = db.Column(db.Text)  # comma separated
    backer_count = db.Column(db.Integer, nullable=False, default=0)
    goal_amount = db.Column(db.Integer, nullable=False, default=0)
    current_amount = db.Column(db.Integer, nullable=False, default=0)
    slug = db.Column(db.String(255), index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship('User', back_populates='campaigns')
    images = relationship('CampaignImage', back_populates='campaign', lazy=True,
                          cascade='all, delete-orphan', order_by='CampaignImage.id')
    transactions = relationship('Transaction', back_populates='campaign', lazy=True)

    @property
    def perk_list(self):
        if not self.perks:
            return []
        return [perk.strip() for perk in self.perks.split(',') if perk.strip()]

    @property
    def primary_image(self):
        for image in self.images:
            if image.is_primary:
                return image
        return None

    def __repr__(self):
        return f'<Campaign {self.slug}>'


class CampaignImage(db.Model):
    __tablename__ = 'campaign_images'
    id = db.Column(db.Integer, primary_key=True)
    campaign_id = db.Column(db.Integer, db.ForeignKey('campaigns.id'), nullable=False, index=True)
    file_name = db.Column(db.String(255), nullable=False)
    is_primary = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    campaign = relationship('Campaign', back_populates='images')

    def __repr__(self):
        return f'<CampaignImage {self.campaign_id} - {self.file_name}>'


class Transaction(db.Model):
    __tablename__ = 'transactions'
    id = db.Column(db.Integer, primary_key=True)
    campaign_id = db.Column(db.Integer, db.ForeignKey('campaigns.id'), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    amount = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=TransactionStatus.PENDING, index=True)
    code = db.Column(db.String(64), unique=True, nullable=False)
    payment_url = db.Column(db.String(512))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    campaign = relationship('Campaign', back_populates='transactions')
    user = relationship('User', back_populates='transactions')

    def __repr__(self):
        return f'<Transaction {self.code} {self.amount} status={self.status}>'
