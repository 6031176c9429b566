import pytest

from portal import create_app
from portal.extensions import db
from portal.models import User
from portal.services.article_service import ArticleService
from portal.services.category_service import CategoryService
from portal.services.user_service import UserService
from portal.utils.permissions import Identity


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', {'UPLOAD_FOLDER': str(tmp_path / 'uploads')})
    with app.app_context():
        db.create_all()
        UserService.create_user({'username': 'admin', 'password': 'admin123', 'role': User.ROLE_ADMIN})
        UserService.create_user({'username': 'editor', 'password': 'editor123', 'role': User.ROLE_EDITOR})

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username, password):
    return client.post('/api/auth/login', json={'username': username, 'password': password})


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    assert login(client, 'admin', 'admin123').status_code == 200
    return client


@pytest.fixture
def editor_client(app):
    client = app.test_client()
    assert login(client, 'editor', 'editor123').status_code == 200
    return client


def identity_for(username):
    """需在 app context 中调用"""
    return Identity.from_user(User.query.filter_by(username=username).first())


@pytest.fixture
def category_id(app):
    with app.app_context():
        return CategoryService.create_category({'name': 'Teknologi'}).id


@pytest.fixture
def make_article(app, category_id):
    """直接通过服务层创建文章，返回文章 ID"""
    def _make(title, status='published', content='<p>body</p>', category=None, author='editor'):
        with app.app_context():
            article = ArticleService.create_article({
                'title': title,
                'content': content,
                'category_id': category or category_id,
                'status': status,
            }, identity_for(author))
            return article.id
    return _make
