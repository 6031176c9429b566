"""
JSON 接口表单基类
基于 Flask-WTF：请求体为 JSON 时 FlaskForm 会自动读取 request.get_json()
"""
from flask import request
from flask_wtf import FlaskForm
from wtforms import IntegerField, StringField, TextAreaField, PasswordField

from portal.exceptions import ValidationError


class ApiForm(FlaskForm):
    """接口表单：CSRF 由全局 CSRFProtect 负责"""

    class Meta:
        csrf = False

    def payload(self):
        """表单中保留字段的值，空字符串按 None 处理"""
        return {
            name: (None if field.data == '' else field.data)
            for name, field in self._fields.items()
        }

    def validated(self):
        """校验通过返回字段字典，否则抛出带字段明细的 ValidationError"""
        if not self.validate_on_submit():
            raise ValidationError('Validation failed', payload={'errors': self.errors})
        return self.payload()


class PatchForm(ApiForm):
    """
    局部更新表单
    只保留请求体中出现过的字段：缺省字段不参与校验也不会被写入，
    显式传入 null 的字段会以 None 写入
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        supplied = request.get_json(silent=True) if request.is_json else request.form
        supplied = supplied or {}
        for name in list(self._fields):
            if name not in supplied:
                del self[name]


class IdField(IntegerField):
    """整数 ID 字段：JSON 中的 null 视为未填写"""

    def process_formdata(self, valuelist):
        if valuelist and valuelist[0] is None:
            self.data = None
            return
        super().process_formdata(valuelist)


class StrictTextMixin:
    """JSON 中非字符串的值（如数字、对象）记为字段错误，而不是交给后续校验器"""

    def process_formdata(self, valuelist):
        if valuelist and valuelist[0] is not None and not isinstance(valuelist[0], str):
            raise ValueError(self.gettext('Must be a string'))
        super().process_formdata(valuelist)


class TextField(StrictTextMixin, StringField):
    pass


class TextBlockField(StrictTextMixin, TextAreaField):
    pass


class SecretField(StrictTextMixin, PasswordField):
    pass
