# art_portfolio/session_store.py
"""
Server-side sessions kept in the application database.

The browser only ever sees a signed, opaque session id. The session
contents (logged-in user id, pending flash messages) live in the
``sessions`` table and expire together with the cookie.
"""
import logging
import secrets

from flask.json.tag import TaggedJSONSerializer
from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.datastructures import CallbackDict

from .models import db, utcnow, SessionRecord

logger = logging.getLogger(__name__)


class ServerSideSession(CallbackDict, SessionMixin):

    def __init__(self, initial=None, sid=None, new=False, touched_at=None):
        def on_update(self):
            self.modified = True

        CallbackDict.__init__(self, initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False
        self.touched_at = touched_at
        self.previous_sid = None

    def regenerate(self):
        """Moves the session contents to a fresh id, discarding the old one."""
        if self.previous_sid is None and not self.new:
            self.previous_sid = self.sid
        self.sid = DatabaseSessionInterface.generate_sid()
        self.modified = True


class DatabaseSessionInterface(SessionInterface):
    session_class = ServerSideSession
    serializer = TaggedJSONSerializer()
    salt = 'art-portfolio-session'

    @staticmethod
    def generate_sid():
        return secrets.token_urlsafe(32)

    def get_signer(self, app):
        if not app.secret_key:
            return None
        return Signer(app.secret_key, salt=self.salt)

    def _new_session(self):
        return self.session_class(sid=self.generate_sid(), new=True)

    def open_session(self, app, request):
        signer = self.get_signer(app)
        if signer is None:
            return None

        cookie_value = request.cookies.get(self.get_cookie_name(app))
        if not cookie_value:
            return self._new_session()

        try:
            sid = signer.unsign(cookie_value).decode('utf-8')
        except BadSignature:
            logger.info("Discarding session cookie with a bad signature.")
            return self._new_session()

        record = db.session.get(SessionRecord, sid)
        if record is None or record.is_expired():
            return self._new_session()

        try:
            data = self.serializer.loads(record.data)
        except ValueError:
            logger.warning(f"Session {sid[:8]} holds unreadable data, starting over.")
            return self._new_session()
        return self.session_class(data, sid=sid, touched_at=record.updated_at)

    def _needs_touch(self, app, session, now):
        if session.touched_at is None:
            return True
        return now - session.touched_at >= app.config.get('SESSION_TOUCH_AFTER')

    def _delete_record(self, sid):
        record = db.session.get(SessionRecord, sid)
        if record is not None:
            db.session.delete(record)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if session.previous_sid:
            self._delete_record(session.previous_sid)

        # Emptied session (e.g. after logout): drop it server-side and client-side.
        if not session and not session.new and session.modified:
            try:
                self._delete_record(session.sid)
                db.session.commit()
            except SQLAlchemyError as e:
                db.session.rollback()
                logger.error(f"Session store error: {e}", exc_info=True)
            response.delete_cookie(name, domain=domain, path=path)
            return

        if session.new and not session and not app.config.get('SESSION_SAVE_UNINITIALIZED', True):
            return

        now = utcnow()
        if not (session.new or session.modified or self._needs_touch(app, session, now)):
            return

        lifetime = app.permanent_session_lifetime
        expires_at = now + lifetime
        try:
            record = db.session.get(SessionRecord, session.sid)
            if record is None:
                record = SessionRecord(sid=session.sid)
                db.session.add(record)
            record.data = self.serializer.dumps(dict(session))
            record.expires_at = expires_at
            record.updated_at = now
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Session store error: {e}", exc_info=True)
            return

        signer = self.get_signer(app)
        response.set_cookie(
            name,
            signer.sign(session.sid.encode('utf-8')).decode('utf-8'),
            expires=expires_at,
            max_age=int(lifetime.total_seconds()),
            httponly=self.get_cookie_httponly(app),
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
            domain=domain,
            path=path,
        )


def purge_expired_sessions(now=None):
    """Deletes every expired session row and returns how many were removed."""
    deleted = SessionRecord.query.filter(SessionRecord.expires_at <= (now or utcnow())).delete()
    db.session.commit()
    return deleted
