from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from portal.extensions import db
from .base import BaseModel

class User(UserMixin, BaseModel):
    """后台用户 (管理员 / 编辑)"""
    __tablename__ = 'users'
    __hidden_fields__ = ('password_hash',)

    ROLE_ADMIN = 'admin'
    ROLE_EDITOR = 'editor'
    ROLES = (ROLE_ADMIN, ROLE_EDITOR)

    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255))
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    role = db.Column(db.String(20), nullable=False, default=ROLE_EDITOR)  # admin, editor

    articles = db.relationship('Article', back_populates='author', lazy='dynamic')
    uploads = db.relationship('Upload', back_populates='uploader', lazy='dynamic')

    @property
    def password(self):
        raise AttributeError('password is write-only')

    @password.setter
    def password(self, password):
        self.password_hash = generate_password_hash(password)

    def verify_password(self, password):
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN

    def __repr__(self):
        return f'<User {self.username}>'
