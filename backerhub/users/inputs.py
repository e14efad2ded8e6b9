from wtforms import Form, StringField, PasswordField
from wtforms.validators import DataRequired, Email, Optional, Length


class RegisterUserInput(Form):
    name = StringField('Name', validators=[DataRequired(), Length(max=128)])
    occupation = StringField('Occupation', validators=[Optional(), Length(max=128)])
    email = StringField('Email', validators=[DataRequired(), Email()])
    password = PasswordField('Password', validators=[DataRequired()])


class LoginInput(Form):
    email = StringField('Email', validators=[DataRequired(), Email()])
    password = PasswordField('Password', validators=[DataRequired()])


class CheckEmailInput(Form):
    email = StringField('Email', validators=[DataRequired(), Email()])
