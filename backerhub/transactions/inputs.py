from wtforms import Form, StringField, IntegerField
from wtforms.validators import DataRequired, NumberRange, Optional


class CreateTransactionInput(Form):
    amount = IntegerField('Amount', validators=[DataRequired(), NumberRange(min=1)])
    campaign_id = IntegerField('Campaign', validators=[DataRequired()])


class TransactionNotificationInput(Form):
    transaction_status = StringField('Transaction Status', validators=[DataRequired()])
    order_id = StringField('Order ID', validators=[DataRequired()])
    payment_type = StringField('Payment Type', validators=[Optional()])
    fraud_status = StringField('Fraud Status', validators=[Optional()])
