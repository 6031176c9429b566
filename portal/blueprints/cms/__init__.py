from flask import Blueprint

# 后台内容管理接口（文章 / 分类 / 上传 / 仪表盘）
cms_bp = Blueprint('cms', __name__)

from . import routes
