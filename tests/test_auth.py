from portal.models import User
from portal.services.user_service import UserService
from tests.conftest import login


def test_validate_user_with_seeded_password(app):
    with app.app_context():
        user = UserService.validate_user('admin', 'admin123')
        assert user is not None
        assert user.username == 'admin'


def test_validate_user_rejects_wrong_password_and_unknown_user(app):
    with app.app_context():
        assert UserService.validate_user('admin', 'wrong') is None
        assert UserService.validate_user('nobody', 'admin123') is None
        assert UserService.validate_user('admin', '') is None


def test_password_is_stored_hashed(app):
    with app.app_context():
        user = User.query.filter_by(username='admin').first()
        assert user.password_hash != 'admin123'
        assert user.verify_password('admin123')


def test_login_returns_user_without_password(client):
    resp = login(client, 'admin', 'admin123')
    assert resp.status_code == 200
    user = resp.get_json()['user']
    assert user['username'] == 'admin'
    assert user['role'] == 'admin'
    assert 'password_hash' not in user
    assert 'password' not in user


def test_login_failure_is_generic(client):
    wrong_password = login(client, 'admin', 'nope')
    unknown_user = login(client, 'ghost', 'admin123')
    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.get_json()['message'] == unknown_user.get_json()['message']


def test_login_requires_both_fields(client):
    resp = client.post('/api/auth/login', json={'username': 'admin'})
    assert resp.status_code == 400
    assert 'password' in resp.get_json()['errors']


def test_login_with_non_string_password_is_validation_error(client):
    resp = login(client, 'admin', 12345678)
    assert resp.status_code == 400
    assert 'password' in resp.get_json()['errors']


def test_me_requires_session(client):
    resp = client.get('/api/auth/me')
    assert resp.status_code == 401
    assert resp.get_json()['success'] is False


def test_me_and_logout(client):
    login(client, 'editor', 'editor123')
    resp = client.get('/api/auth/me')
    assert resp.status_code == 200
    assert resp.get_json()['user']['username'] == 'editor'

    assert client.post('/api/auth/logout').status_code == 200
    assert client.get('/api/auth/me').status_code == 401


def test_admin_routes_reject_anonymous(client):
    assert client.get('/api/admin/articles').status_code == 401
    assert client.post('/api/admin/categories', json={'name': 'X'}).status_code == 401
    assert client.get('/api/admin/users').status_code == 401


def test_csrf_token_endpoint(client):
    resp = client.get('/api/auth/csrf')
    assert resp.status_code == 200
    assert resp.get_json()['csrf_token']
