# art_portfolio/models/user_models.py
import re

from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from .base import db, BaseModel


class User(BaseModel, UserMixin):
    """
    Credential-bearing identity. The session only ever holds the user's id;
    Flask-Login turns it back into a User on each request.
    """
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password) if self.password_hash else False

    @staticmethod
    def validate_password(password):
        if not password or len(password) < 8: return "Password must be at least 8 characters long."
        if not re.search(r"[A-Z]", password): return "Password must contain an uppercase letter."
        if not re.search(r"[a-z]", password): return "Password must contain a lowercase letter."
        if not re.search(r"[0-9]", password): return "Password must contain a digit."
        return None

    @classmethod
    def authenticate(cls, username, password):
        """Returns the matching user when the credentials check out, otherwise None."""
        if not username or not password:
            return None
        user = cls.query.filter_by(username=username).first()
        if user and user.check_password(password):
            return user
        return None

    @classmethod
    def register(cls, username, email, password):
        user = cls(username=username, email=email)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user

    def __repr__(self):
        return f'<User {self.username}>'
