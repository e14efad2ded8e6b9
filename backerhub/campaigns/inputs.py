from wtforms import Form, StringField, IntegerField, BooleanField, TextAreaField
from wtforms.validators import DataRequired, NumberRange, Length, Optional


class CampaignInput(Form):
    name = StringField('Name', validators=[DataRequired(), Length(max=255)])
    short_description = StringField('Short Description', validators=[DataRequired(), Length(max=255)])
    description = TextAreaField('Description', validators=[DataRequired()])
    goal_amount = IntegerField('Goal Amount', validators=[DataRequired(), NumberRange(min=1)])
    perks = StringField('Perks', validators=[Optional()])


class CampaignImageInput(Form):
    campaign_id = IntegerField('Campaign', validators=[DataRequired()])
    is_primary = BooleanField('Primary')
