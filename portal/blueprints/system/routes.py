"""
系统管理模块 - 用户管理（仅管理员）
"""
from flask import jsonify

from portal.blueprints.system import system_bp
from portal.blueprints.system.forms import UserForm, UserUpdateForm
from portal.services.user_service import UserService
from portal.utils.permissions import admin_required

@system_bp.route('/users')
@admin_required
def users(identity):
    return jsonify([u.to_dict() for u in UserService.list_users()])

@system_bp.route('/users/<int:id>')
@admin_required
def user_detail(id, identity):
    return jsonify(UserService.get_user(id).to_dict())

@system_bp.route('/users', methods=['POST'])
@admin_required
def create_user(identity):
    data = UserForm().validated()
    user = UserService.create_user(data)
    return jsonify(user.to_dict()), 201

@system_bp.route('/users/<int:id>', methods=['PUT', 'PATCH'])
@admin_required
def update_user(id, identity):
    patch = UserUpdateForm().validated()
    user = UserService.update_user(id, patch)
    return jsonify(user.to_dict())

@system_bp.route('/users/<int:id>', methods=['DELETE'])
@admin_required
def delete_user(id, identity):
    UserService.delete_user(id, identity)
    return jsonify({'message': 'User deleted successfully'})
