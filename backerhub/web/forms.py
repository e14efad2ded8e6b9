from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired, FileAllowed
from wtforms import StringField, PasswordField, IntegerField, SelectField, TextAreaField, BooleanField, SubmitField
from wtforms.validators import DataRequired, Email, NumberRange, Optional, Length

IMAGE_EXTENSIONS = ['png', 'jpg', 'jpeg', 'gif', 'webp']


class LoginForm(FlaskForm):
    email = StringField('Email', validators=[DataRequired(), Email()])
    password = PasswordField('Password', validators=[DataRequired()])
    submit = SubmitField('Sign In')


class UserCreateForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired(), Length(max=128)])
    email = StringField('Email', validators=[DataRequired(), Email()])
    occupation = StringField('Occupation', validators=[Optional(), Length(max=128)])
    password = PasswordField('Password', validators=[DataRequired()])
    submit = SubmitField('Create User')


class UserUpdateForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired(), Length(max=128)])
    email = StringField('Email', validators=[DataRequired(), Email()])
    occupation = StringField('Occupation', validators=[Optional(), Length(max=128)])
    submit = SubmitField('Update User')


class AvatarForm(FlaskForm):
    avatar = FileField('Avatar', validators=[FileRequired(), FileAllowed(IMAGE_EXTENSIONS, 'Images only.')])
    submit = SubmitField('Upload Avatar')


class CampaignUpdateForm(FlaskForm):
    name = StringField('Campaign Name', validators=[DataRequired(), Length(max=255)])
    short_description = StringField('Short Description', validators=[DataRequired(), Length(max=255)])
    description = TextAreaField('Description', validators=[DataRequired()])
    goal_amount = IntegerField('Goal Amount', validators=[DataRequired(), NumberRange(min=1)])
    perks = StringField('Perks', validators=[Optional()])
    submit = SubmitField('Save Campaign')


class CampaignCreateForm(CampaignUpdateForm):
    user_id = SelectField('Campaign Owner', coerce=int, validators=[DataRequired()])


class CampaignImageForm(FlaskForm):
    file = FileField('Image', validators=[FileRequired(), FileAllowed(IMAGE_EXTENSIONS, 'Images only.')])
    is_primary = BooleanField('Primary Image', default=True)
    submit = SubmitField('Upload Image')
