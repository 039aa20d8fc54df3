from datetime import timedelta

from itsdangerous import Signer

from art_portfolio.models import db, utcnow, SessionRecord
from art_portfolio.session_store import DatabaseSessionInterface, purge_expired_sessions


def _sid(app, client):
    cookie = client.get_cookie('session')
    return Signer(app.secret_key, salt=DatabaseSessionInterface.salt).unsign(cookie.value).decode()


def _session_cookie_headers(response):
    return [h for h in response.headers.getlist('Set-Cookie') if h.startswith('session=')]


def test_first_visit_issues_http_only_week_long_cookie(app, client):
    response = client.get('/')

    [header] = _session_cookie_headers(response)
    assert 'HttpOnly' in header
    assert 'Max-Age=604800' in header
    assert 'Expires=' in header
    assert 'Secure' not in header
    with app.app_context():
        record = db.session.get(SessionRecord, _sid(app, client))
        assert record is not None
        assert record.expires_at - utcnow() > timedelta(days=6, hours=23)


def test_cookie_value_is_signed_session_id(app, client):
    client.get('/')
    value = client.get_cookie('session').value
    sid = _sid(app, client)
    assert value.startswith(sid + '.')


def test_unmodified_session_is_not_rewritten_before_touch_interval(client):
    client.get('/')
    assert _session_cookie_headers(client.get('/about')) == []


def test_session_is_touched_after_interval(app, client):
    client.get('/')
    sid = _sid(app, client)
    stale = utcnow() - timedelta(days=2)
    with app.app_context():
        record = db.session.get(SessionRecord, sid)
        record.updated_at = stale
        db.session.commit()

    response = client.get('/about')

    assert len(_session_cookie_headers(response)) == 1
    with app.app_context():
        assert db.session.get(SessionRecord, sid).updated_at > stale


def test_forged_cookie_starts_a_new_session(app, client):
    client.set_cookie('session', 'forged-id.bad-signature')
    response = client.get('/')
    assert len(_session_cookie_headers(response)) == 1
    assert _sid(app, client) != 'forged-id'


def test_expired_session_is_not_resumed(app, auth_client):
    sid = _sid(app, auth_client)
    with app.app_context():
        record = db.session.get(SessionRecord, sid)
        record.expires_at = utcnow() - timedelta(seconds=1)
        db.session.commit()

    assert auth_client.get('/artwork/new').status_code == 302
    assert _sid(app, auth_client) != sid


def test_uninitialized_sessions_can_be_skipped(app, client):
    app.config['SESSION_SAVE_UNINITIALIZED'] = False
    response = client.get('/')
    assert _session_cookie_headers(response) == []
    with app.app_context():
        assert SessionRecord.query.count() == 0


def test_purge_expired_sessions(app):
    now = utcnow()
    with app.app_context():
        db.session.add(SessionRecord(sid='old', data='{}', expires_at=now - timedelta(minutes=1)))
        db.session.add(SessionRecord(sid='live', data='{}', expires_at=now + timedelta(days=1)))
        db.session.commit()

        assert purge_expired_sessions(now=now) == 1
        assert [r.sid for r in SessionRecord.query.all()] == ['live']


def test_purge_sessions_command(app):
    with app.app_context():
        db.session.add(SessionRecord(sid='old', data='{}', expires_at=utcnow() - timedelta(minutes=1)))
        db.session.commit()

    result = app.test_cli_runner().invoke(args=['purge-sessions'])

    assert 'Purged 1 expired session(s).' in result.output
