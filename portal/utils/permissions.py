"""
Session Gate
把请求会话解析为显式的 Identity，并提供登录 / 管理员两级访问控制
"""
from dataclasses import dataclass
from functools import wraps
from flask_login import current_user

from portal.exceptions import AuthenticationRequired, PermissionDenied


@dataclass(frozen=True)
class Identity:
    """已认证身份（在视图与服务之间显式传递）"""
    id: int
    username: str
    role: str

    @property
    def is_admin(self):
        return self.role == 'admin'

    @classmethod
    def from_user(cls, user):
        return cls(id=user.id, username=user.username, role=user.role)


def current_identity():
    """解析当前请求的身份，未登录返回 None"""
    if not current_user.is_authenticated:
        return None
    return Identity.from_user(current_user)


def login_required(f):
    """
    登录校验装饰器
    校验通过后以 identity= 关键字参数注入当前身份
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        identity = current_identity()
        if identity is None:
            raise AuthenticationRequired('Unauthorized')
        return f(*args, identity=identity, **kwargs)
    return decorated_function


def admin_required(f):
    """
    管理员权限装饰器
    未登录返回 401，非管理员返回 403
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        identity = current_identity()
        if identity is None:
            raise AuthenticationRequired('Unauthorized')
        if not identity.is_admin:
            raise PermissionDenied('Admin access required')
        return f(*args, identity=identity, **kwargs)
    return decorated_function
