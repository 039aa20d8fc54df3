# art_portfolio/models/session_models.py
from .base import db, utcnow


class SessionRecord(db.Model):
    """Server-side session state, keyed by the id carried in the session cookie."""
    __tablename__ = 'sessions'
    sid = db.Column(db.String(64), primary_key=True)
    data = db.Column(db.Text, nullable=False, default='{}')
    expires_at = db.Column(db.DateTime, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def is_expired(self, now=None):
        return self.expires_at <= (now or utcnow())

    def __repr__(self): return f'<SessionRecord {self.sid[:8]}>'
