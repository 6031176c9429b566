from portal.models import User
from portal.services.user_service import UserService


def _user_id(app, username):
    with app.app_context():
        return User.query.filter_by(username=username).first().id


def test_editor_gets_authorization_failure_on_user_management(editor_client, app):
    admin_id = _user_id(app, 'admin')
    assert editor_client.get('/api/admin/users').status_code == 403
    assert editor_client.post('/api/admin/users', json={'username': 'x', 'password': 'secret1'}).status_code == 403
    assert editor_client.delete(f'/api/admin/users/{admin_id}').status_code == 403
    # 不存在的用户也先返回 403，而不是 404
    assert editor_client.put('/api/admin/users/9999', json={'first_name': 'X'}).status_code == 403


def test_list_users_hides_password(admin_client):
    resp = admin_client.get('/api/admin/users')
    assert resp.status_code == 200
    users = resp.get_json()
    assert {u['username'] for u in users} == {'admin', 'editor'}
    assert all('password_hash' not in u for u in users)


def test_create_user_and_duplicate_username(admin_client, app):
    resp = admin_client.post('/api/admin/users', json={
        'username': 'writer', 'password': 'writer123', 'email': 'writer@example.com',
    })
    assert resp.status_code == 201
    assert resp.get_json()['role'] == 'editor'
    with app.app_context():
        assert UserService.validate_user('writer', 'writer123') is not None

    dup = admin_client.post('/api/admin/users', json={'username': 'writer', 'password': 'another1'})
    assert dup.status_code == 409


def test_create_user_validation_errors(admin_client):
    resp = admin_client.post('/api/admin/users', json={
        'username': 'bad name!', 'password': '123', 'email': 'not-an-email', 'role': 'root',
    })
    assert resp.status_code == 400
    errors = resp.get_json()['errors']
    assert {'username', 'password', 'email', 'role'} <= set(errors)


def test_update_without_password_keeps_hash(admin_client, app):
    editor_id = _user_id(app, 'editor')
    resp = admin_client.put(f'/api/admin/users/{editor_id}', json={'first_name': 'Edi', 'password': ''})
    assert resp.status_code == 200
    assert resp.get_json()['first_name'] == 'Edi'
    with app.app_context():
        assert UserService.validate_user('editor', 'editor123') is not None

    nulled = admin_client.patch(f'/api/admin/users/{editor_id}', json={'first_name': 'E', 'password': None})
    assert nulled.status_code == 200
    assert nulled.get_json()['first_name'] == 'E'
    with app.app_context():
        assert UserService.validate_user('editor', 'editor123') is not None


def test_update_with_password_rehashes(admin_client, app):
    editor_id = _user_id(app, 'editor')
    resp = admin_client.patch(f'/api/admin/users/{editor_id}', json={'password': 'newsecret'})
    assert resp.status_code == 200
    with app.app_context():
        assert UserService.validate_user('editor', 'editor123') is None
        assert UserService.validate_user('editor', 'newsecret') is not None


def test_partial_update_leaves_other_fields(admin_client, app):
    editor_id = _user_id(app, 'editor')
    admin_client.patch(f'/api/admin/users/{editor_id}', json={'email': 'ed@example.com'})
    resp = admin_client.patch(f'/api/admin/users/{editor_id}', json={'last_name': 'Tor'})
    data = resp.get_json()
    assert data['email'] == 'ed@example.com'
    assert data['last_name'] == 'Tor'
    assert data['role'] == 'editor'


def test_admin_cannot_delete_self(admin_client, app):
    admin_id = _user_id(app, 'admin')
    resp = admin_client.delete(f'/api/admin/users/{admin_id}')
    assert resp.status_code == 403
    with app.app_context():
        assert User.query.filter_by(username='admin').first() is not None


def test_delete_user(admin_client, app):
    created = admin_client.post('/api/admin/users', json={'username': 'temp', 'password': 'temp123'})
    user_id = created.get_json()['id']
    assert admin_client.delete(f'/api/admin/users/{user_id}').status_code == 200
    assert admin_client.get(f'/api/admin/users/{user_id}').status_code == 404


def test_delete_user_with_articles_is_rejected(admin_client, app, make_article):
    make_article('Editor Story', author='editor')
    editor_id = _user_id(app, 'editor')
    resp = admin_client.delete(f'/api/admin/users/{editor_id}')
    assert resp.status_code == 409
    assert resp.get_json()['article_count'] == 1
