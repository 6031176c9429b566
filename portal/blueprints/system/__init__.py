from flask import Blueprint

# 后台用户管理接口（仅管理员）
system_bp = Blueprint('system', __name__)

from . import routes
