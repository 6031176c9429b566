from flask import current_app

from portal.exceptions import Conflict, NotFound, PermissionDenied, ValidationError
from portal.extensions import db
from portal.models import User
from portal.services import commit_or_conflict

PROFILE_FIELDS = ('username', 'email', 'first_name', 'last_name', 'role')


class UserService:
    """凭证存储与用户管理"""

    @staticmethod
    def validate_user(username, password):
        """
        校验用户名 + 密码
        用户不存在或密码错误都返回 None，不区分原因
        """
        if not username or not password:
            return None
        user = User.query.filter_by(username=username).first()
        if user is None:
            current_app.logger.info('login failed: unknown user')
            return None
        if not user.verify_password(password):
            current_app.logger.info(f'login failed: bad password for user {user.id}')
            return None
        return user

    @staticmethod
    def get_user(user_id):
        user = db.session.get(User, user_id)
        if user is None:
            raise NotFound('User not found')
        return user

    @staticmethod
    def list_users():
        return User.query.order_by(User.created_at.desc(), User.id.desc()).all()

    @staticmethod
    def create_user(data):
        if not data.get('password'):
            raise ValidationError.for_field('password', 'Password is required')

        user = User(
            username=data['username'],
            email=data.get('email'),
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            role=data.get('role') or User.ROLE_EDITOR,
            password=data['password'],  # Setter 会自动 Hash
        )
        db.session.add(user)
        commit_or_conflict('Username already exists')
        current_app.logger.info(f'user created: {user.username} ({user.role})')
        return user

    @staticmethod
    def update_user(user_id, patch):
        """
        局部更新用户
        password 缺省或为空时保留原有哈希
        """
        user = UserService.get_user(user_id)
        for field in PROFILE_FIELDS:
            if field in patch:
                setattr(user, field, patch[field])
        if patch.get('password'):
            user.password = patch['password']

        commit_or_conflict('Username already exists')
        current_app.logger.info(f'user updated: {user.username}')
        return user

    @staticmethod
    def delete_user(user_id, identity):
        """删除用户：禁止删除自己；仍有文章或上传文件的用户拒绝删除"""
        if user_id == identity.id:
            raise PermissionDenied('Cannot delete your own account')

        user = UserService.get_user(user_id)
        authored = user.articles.count()
        if authored:
            raise Conflict('User still owns articles', payload={'article_count': authored})
        if user.uploads.count():
            raise Conflict('User still owns uploads')

        db.session.delete(user)
        db.session.commit()
        current_app.logger.info(f'user deleted: {user.username} by {identity.username}')
