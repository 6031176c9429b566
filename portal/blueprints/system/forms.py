from wtforms import SelectField
from wtforms.validators import DataRequired, Length

from portal.models import User
from portal.utils.forms import ApiForm, PatchForm, TextField, SecretField
from portal.utils.validators import NullableOptional, validate_username, validate_email

ROLE_CHOICES = [
    (User.ROLE_ADMIN, 'Admin'),
    (User.ROLE_EDITOR, 'Editor')
]

class UserForm(ApiForm):
    """用户创建表单"""
    username = TextField('Username', validators=[
        DataRequired(), Length(min=2, max=50), validate_username
    ])
    password = SecretField('Password', validators=[
        DataRequired(), Length(min=6, message="Password must be at least 6 characters")
    ])
    email = TextField('Email', validators=[NullableOptional(), Length(max=255), validate_email])
    first_name = TextField('First name', validators=[NullableOptional(), Length(max=100)])
    last_name = TextField('Last name', validators=[NullableOptional(), Length(max=100)])
    role = SelectField('Role', choices=ROLE_CHOICES, default=User.ROLE_EDITOR)

class UserUpdateForm(PatchForm, UserForm):
    """用户局部更新表单：密码留空或为 null 则保持不变"""
    password = SecretField('Password', validators=[
        NullableOptional(), Length(min=6, message="Password must be at least 6 characters")
    ])
