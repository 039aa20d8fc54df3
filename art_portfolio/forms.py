# art_portfolio/forms.py
import math

from flask_wtf import FlaskForm
from wtforms import FloatField, PasswordField, StringField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional, URL, ValidationError

from .errors import PortfolioError
from .models import User
from .utils import is_valid_email


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class ArtworkForm(FlaskForm):
    """Fields are submitted as ``artwork-<name>``."""

    title = StringField('Title', filters=[_strip], validators=[DataRequired(), Length(max=150)])
    description = TextAreaField('Description', filters=[_strip], validators=[DataRequired()])
    image_url = StringField('Image URL', filters=[_strip], validators=[Optional(), URL(), Length(max=255)])
    price = FloatField('Price', validators=[InputRequired(), NumberRange(min=0)])

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('prefix', 'artwork')
        super().__init__(*args, **kwargs)

    def validate_price(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError('Price must be a finite number.')

    def to_fields(self):
        return {
            'title': self.title.data,
            'description': self.description.data,
            'image_url': self.image_url.data or None,
            'price': self.price.data,
        }


class LoginForm(FlaskForm):
    username = StringField('Username', filters=[_strip], validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])


class SignupForm(FlaskForm):
    username = StringField('Username', filters=[_strip], validators=[DataRequired(), Length(min=3, max=80)])
    email = StringField('Email', filters=[_strip], validators=[DataRequired(), Length(max=120)])
    password = PasswordField('Password', validators=[DataRequired()])

    def validate_email(self, field):
        if not is_valid_email(field.data):
            raise ValidationError('Invalid email format.')

    def validate_password(self, field):
        error = User.validate_password(field.data)
        if error:
            raise ValidationError(error)


def form_error_messages(form):
    messages = []
    for field_name, errors in form.errors.items():
        label = form[field_name].label.text if field_name in form else field_name
        messages.extend(f"{label}: {error}" for error in errors)
    return messages


def validate_artwork(form):
    """
    Rejects a malformed artwork payload before anything is persisted.

    Raises:
        PortfolioError: 400 with every validation message joined by commas.
    """
    if not form.validate():
        raise PortfolioError(', '.join(form_error_messages(form)), 400)
    return form.to_fields()
