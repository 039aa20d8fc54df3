import pytest

from art_portfolio import create_app
from art_portfolio.models import db, User

PASSWORD = 'Secret123'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user_id(app):
    with app.app_context():
        return User.register('artist', 'artist@example.com', PASSWORD).id


def login(client, username='artist', password=PASSWORD, **kwargs):
    return client.post('/login', data={'username': username, 'password': password}, **kwargs)


@pytest.fixture
def auth_client(client, user_id):
    response = login(client)
    assert response.status_code == 302
    return client


def artwork_form(**overrides):
    data = {
        'artwork-title': 'Harbour at Dusk',
        'artwork-description': 'Oil on linen, 60 x 80 cm.',
        'artwork-image_url': 'https://images.unsplash.com/photo-1',
        'artwork-price': '1200',
    }
    data.update(overrides)
    return data
