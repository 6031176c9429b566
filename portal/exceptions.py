class PortalException(Exception):
    """新闻门户基础异常类"""
    def __init__(self, message, code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['code'] = self.code
        rv['success'] = False
        return rv

class ValidationError(PortalException):
    """输入校验错误"""
    def __init__(self, message="Invalid data", payload=None):
        super().__init__(message, code=400, payload=payload)

    @classmethod
    def for_field(cls, field, message):
        return cls(message, payload={'errors': {field: [message]}})

class AuthenticationRequired(PortalException):
    """未登录或凭证无效"""
    def __init__(self, message="Not authenticated", payload=None):
        super().__init__(message, code=401, payload=payload)

class PermissionDenied(PortalException):
    """权限不足"""
    def __init__(self, message="Access denied", payload=None):
        super().__init__(message, code=403, payload=payload)

class NotFound(PortalException):
    """目标对象不存在"""
    def __init__(self, message="Not found", payload=None):
        super().__init__(message, code=404, payload=payload)

class Conflict(PortalException):
    """唯一约束冲突或仍被引用"""
    def __init__(self, message="Conflict", payload=None):
        super().__init__(message, code=409, payload=payload)
