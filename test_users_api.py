import io
import os

from database import db
from backerhub.models import User


def register(client, **overrides):
    payload = {
        'name': 'Jane Backer',
        'occupation': 'Engineer',
        'email': 'jane@backerhub.io',
        'password': 'secret123',
    }
    payload.update(overrides)
    return client.post('/api/v1/users', json=payload)


def test_register_returns_user_and_token(app, client):
    response = register(client)

    body = response.get_json()
    assert response.status_code == 200
    assert body['meta'] == {'message': 'Account has been registered', 'code': 200, 'status': 'success'}
    assert body['data']['email'] == 'jane@backerhub.io'
    assert body['data']['token']

    user = User.query.filter_by(email='jane@backerhub.io').one()
    assert user.password_hash != 'secret123'
    assert user.check_password('secret123')


def test_register_rejects_invalid_payload(client):
    response = register(client, email='not-an-email', password='')

    body = response.get_json()
    assert response.status_code == 422
    assert body['meta']['message'] == 'Register account failed'
    assert any(error.startswith('email:') for error in body['data']['errors'])
    assert any(error.startswith('password:') for error in body['data']['errors'])


def test_register_rejects_taken_email(client, make_user):
    make_user(email='jane@backerhub.io')

    response = register(client)

    assert response.status_code == 400
    assert response.get_json()['data']['errors'] == ['Email has been registered']


def test_login_returns_token_that_opens_the_gate(client, make_user):
    make_user(email='jane@backerhub.io', password='secret123')

    response = client.post('/api/v1/sessions', json={'email': 'jane@backerhub.io', 'password': 'secret123'})
    token = response.get_json()['data']['token']

    assert response.status_code == 200
    fetched = client.get('/api/v1/users/fetch', headers={'Authorization': f'Bearer {token}'})
    assert fetched.status_code == 200


def test_login_with_wrong_password_fails(client, make_user):
    make_user(email='jane@backerhub.io', password='secret123')

    response = client.post('/api/v1/sessions', json={'email': 'jane@backerhub.io', 'password': 'nope'})

    body = response.get_json()
    assert response.status_code == 422
    assert body['meta']['message'] == 'Login failed'
    assert body['data']['errors'] == ['Wrong password']


def test_login_with_unknown_email_fails(client):
    response = client.post('/api/v1/sessions', json={'email': 'ghost@backerhub.io', 'password': 'x'})

    assert response.status_code == 422
    assert response.get_json()['data']['errors'] == ['No user found on that email']


def test_email_checker(client, make_user):
    make_user(email='jane@backerhub.io')

    taken = client.post('/api/v1/email_checkers', json={'email': 'jane@backerhub.io'}).get_json()
    free = client.post('/api/v1/email_checkers', json={'email': 'john@backerhub.io'}).get_json()

    assert taken['data'] == {'is_available': False}
    assert taken['meta']['message'] == 'Email has been registered'
    assert free['data'] == {'is_available': True}


def test_avatar_upload_without_token_writes_nothing(app, client):
    response = client.post(
        '/api/v1/avatars',
        data={'avatar': (io.BytesIO(b'fake-png'), 'me.png')},
        content_type='multipart/form-data',
    )

    assert response.status_code == 401
    assert response.get_json()['meta']['status'] == 'error'
    assert not os.path.exists(app.config['UPLOAD_FOLDER'])


def test_avatar_upload_stores_file_and_path(app, client, make_user, auth_headers):
    user = make_user()

    response = client.post(
        '/api/v1/avatars',
        data={'avatar': (io.BytesIO(b'fake-png'), 'me.png')},
        content_type='multipart/form-data',
        headers=auth_headers(user),
    )

    assert response.status_code == 200
    assert response.get_json()['data'] == {'is_uploaded': True}
    stored = os.path.join(app.config['UPLOAD_FOLDER'], f'{user.id}-me.png')
    with open(stored, 'rb') as f:
        assert f.read() == b'fake-png'
    assert db.session.get(User, user.id).avatar_file_name.endswith(f'{user.id}-me.png')


def test_avatar_upload_without_file_is_rejected(client, make_user, auth_headers):
    user = make_user()

    response = client.post('/api/v1/avatars', data={}, content_type='multipart/form-data',
                           headers=auth_headers(user))

    assert response.status_code == 400
    assert response.get_json()['data'] == {'is_uploaded': False}
