from flask import jsonify, session, current_app
from flask_login import login_user, logout_user, current_user
from flask_wtf.csrf import generate_csrf

from portal.blueprints.auth import auth_bp
from portal.blueprints.auth.forms import LoginForm
from portal.exceptions import AuthenticationRequired
from portal.services.user_service import UserService
from portal.utils.permissions import login_required

@auth_bp.route('/login', methods=['POST'])
def login():
    """用户名 + 密码登录，成功后建立会话"""
    data = LoginForm().validated()

    user = UserService.validate_user(data['username'], data['password'])
    if user is None:
        # 不提示具体是哪一项错误
        raise AuthenticationRequired('Invalid credentials')

    login_user(user)
    session.permanent = True
    current_app.logger.info(f'login success: {user.username}')
    return jsonify({'user': user.to_dict()})

@auth_bp.route('/logout', methods=['POST'])
def logout():
    if current_user.is_authenticated:
        current_app.logger.info(f'logout: {current_user.username}')
    logout_user()
    session.clear()
    return jsonify({'message': 'Logged out successfully'})

@auth_bp.route('/me')
@login_required
def me(identity):
    """当前登录用户"""
    return jsonify({'user': current_user.to_dict()})

@auth_bp.route('/csrf')
def csrf_token():
    """为前端单页应用下发 CSRF Token（请求头 X-CSRFToken）"""
    return jsonify({'csrf_token': generate_csrf()})
