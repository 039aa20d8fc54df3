import pytest

from art_portfolio.models import db, Artwork

from .conftest import artwork_form


def _create(app, **fields):
    values = dict(title='Still Life', description='Charcoal on paper.', image_url=None, price=300.0)
    values.update(fields)
    with app.app_context():
        artwork = Artwork(**values)
        db.session.add(artwork)
        db.session.commit()
        return artwork.id


def test_index_lists_all_artworks(app, client):
    _create(app, title='Still Life')
    _create(app, title='Morning Fog')

    response = client.get('/artwork')
    assert response.status_code == 200
    assert b'Still Life' in response.data
    assert b'Morning Fog' in response.data


def test_index_when_empty(client):
    assert b'No artwork yet.' in client.get('/artwork').data


def test_new_form_requires_login(client):
    response = client.get('/artwork/new')
    assert response.status_code == 302
    follow = client.get(response.headers['Location'])
    assert b'You must be signed in first!' in follow.data


def test_new_form_renders_for_signed_in_user(auth_client):
    response = auth_client.get('/artwork/new')
    assert response.status_code == 200
    assert b'name="artwork-title"' in response.data


def test_create_redirects_to_detail_page(app, auth_client):
    response = auth_client.post('/artwork', data=artwork_form())

    assert response.status_code == 302
    with app.app_context():
        artwork = Artwork.query.one()
        assert artwork.title == 'Harbour at Dusk'
        assert artwork.price == 1200.0
        assert response.headers['Location'] == f'/artwork/{artwork.id}'

    detail = auth_client.get(response.headers['Location'])
    assert b'Harbour at Dusk' in detail.data
    assert b'$1200.00' in detail.data
    assert b'Successfully added a new artwork!' in detail.data


def test_create_keeps_angle_brackets_and_renders_them_escaped(app, auth_client):
    response = auth_client.post('/artwork', data=artwork_form(**{
        'artwork-title': '<b></b>',
        'artwork-description': 'size a<b and c>d',
    }))

    assert response.status_code == 302
    with app.app_context():
        artwork = Artwork.query.one()
        assert artwork.title == '<b></b>'
        assert artwork.description == 'size a<b and c>d'

    detail = auth_client.get(response.headers['Location'])
    assert b'&lt;b&gt;&lt;/b&gt;' in detail.data
    assert b'size a&lt;b and c&gt;d' in detail.data
    assert b'<b></b>' not in detail.data


@pytest.mark.parametrize('overrides, message', [
    ({'artwork-title': ''}, b'Title: This field is required.'),
    ({'artwork-title': '   '}, b'Title: This field is required.'),
    ({'artwork-description': '   '}, b'Description: This field is required.'),
    ({'artwork-price': '-5'}, b'Price: Number must be at least 0.'),
    ({'artwork-price': 'free'}, b'Price: Not a valid float value.'),
    ({'artwork-price': 'inf'}, b'Price: Price must be a finite number.'),
    ({'artwork-image_url': 'not a url'}, b'Image URL: Invalid URL.'),
])
def test_create_rejects_malformed_payload(app, auth_client, overrides, message):
    response = auth_client.post('/artwork', data=artwork_form(**overrides))

    assert response.status_code == 400
    assert message in response.data
    with app.app_context():
        assert Artwork.query.count() == 0


def test_create_requires_login(app, client):
    response = client.post('/artwork', data=artwork_form())

    assert response.status_code == 302
    assert response.headers['Location'].startswith('/login')
    with app.app_context():
        assert Artwork.query.count() == 0


def test_show_artwork(app, client):
    artwork_id = _create(app, title='Morning Fog', price=45.5)
    response = client.get(f'/artwork/{artwork_id}')
    assert response.status_code == 200
    assert b'Morning Fog' in response.data
    assert b'$45.50' in response.data


def test_edit_form_is_prefilled(app, auth_client):
    artwork_id = _create(app, title='Morning Fog')
    response = auth_client.get(f'/artwork/{artwork_id}/edit')
    assert response.status_code == 200
    assert b'value="Morning Fog"' in response.data
    assert f'/artwork/{artwork_id}?_method=PUT'.encode() in response.data


def test_edit_missing_artwork_is_not_found(auth_client):
    assert auth_client.get('/artwork/42/edit').status_code == 404


def test_update_through_method_override(app, auth_client):
    artwork_id = _create(app)

    response = auth_client.post(f'/artwork/{artwork_id}?_method=PUT',
                                data=artwork_form(**{'artwork-title': 'Renamed', 'artwork-price': '99.5'}))

    assert response.status_code == 302
    assert response.headers['Location'] == f'/artwork/{artwork_id}'
    with app.app_context():
        artwork = db.session.get(Artwork, artwork_id)
        assert artwork.title == 'Renamed'
        assert artwork.price == 99.5


def test_update_with_put(app, auth_client):
    artwork_id = _create(app)
    response = auth_client.put(f'/artwork/{artwork_id}', data=artwork_form(**{'artwork-title': 'Put Title'}))
    assert response.status_code == 302
    with app.app_context():
        assert db.session.get(Artwork, artwork_id).title == 'Put Title'


def test_update_rejects_malformed_payload(app, auth_client):
    artwork_id = _create(app, title='Original')

    response = auth_client.post(f'/artwork/{artwork_id}?_method=PUT', data=artwork_form(**{'artwork-title': ''}))

    assert response.status_code == 400
    with app.app_context():
        assert db.session.get(Artwork, artwork_id).title == 'Original'


def test_update_missing_artwork_is_not_found(auth_client):
    response = auth_client.post('/artwork/42?_method=PUT', data=artwork_form())
    assert response.status_code == 404
    assert b'Artwork not found' in response.data


def test_delete_through_method_override(app, auth_client):
    artwork_id = _create(app)

    response = auth_client.post(f'/artwork/{artwork_id}?_method=DELETE')

    assert response.status_code == 302
    assert response.headers['Location'] == '/artwork'
    with app.app_context():
        assert db.session.get(Artwork, artwork_id) is None
    assert b'Successfully deleted artwork' in auth_client.get('/artwork').data


def test_delete_requires_login(app, client):
    artwork_id = _create(app)
    response = client.post(f'/artwork/{artwork_id}?_method=DELETE')
    assert response.status_code == 302
    with app.app_context():
        assert db.session.get(Artwork, artwork_id) is not None


def test_delete_missing_artwork_is_not_found(auth_client):
    assert auth_client.delete('/artwork/42').status_code == 404
