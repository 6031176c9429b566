from wtforms.validators import DataRequired

from portal.utils.forms import ApiForm, TextField, SecretField

class LoginForm(ApiForm):
    """用户登录表单"""
    username = TextField('Username', validators=[
        DataRequired(message="Username and password are required")
    ])
    password = SecretField('Password', validators=[
        DataRequired(message="Username and password are required")
    ])
