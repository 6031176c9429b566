"""
表单验证器
"""
from wtforms.validators import ValidationError, Optional, StopValidation
import re

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')

def validate_username(form, field):
    """验证用户名格式"""
    if field.data:
        # 只允许字母、数字、下划线、点和连字符
        if not re.match(r'^[\w.-]+$', field.data):
            raise ValidationError('Username may only contain letters, digits, "_", "." and "-"')

def validate_email(form, field):
    """验证邮箱格式（允许为空以便清除）"""
    if field.data and not EMAIL_PATTERN.match(field.data):
        raise ValidationError('Invalid email address')

def validate_slug_format(form, field):
    """显式提供的 slug 必须能生成非空结果"""
    from portal.utils.slug import slugify
    if field.data and not slugify(field.data):
        raise ValidationError('Slug must contain at least one letter or digit')

class NullableOptional(Optional):
    """与 Optional 相同，但 JSON 中的 null 也视为未填写并中止校验链"""

    def __call__(self, form, field):
        if field.raw_data and field.raw_data[0] is None:
            field.errors[:] = []
            raise StopValidation()
        super().__call__(form, field)
