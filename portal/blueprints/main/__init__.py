from flask import Blueprint

# 公开阅读接口，url_prefix 在 portal/__init__.py 注册时设置
main_bp = Blueprint('main', __name__)

from . import routes
