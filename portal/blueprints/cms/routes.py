from flask import jsonify, request

from portal.blueprints.cms import cms_bp
from portal.blueprints.cms.forms import (
    ArticleForm, ArticleUpdateForm, CategoryForm, CategoryUpdateForm
)
from portal.exceptions import ValidationError
from portal.services.article_service import ArticleService
from portal.services.category_service import CategoryService
from portal.services.query import ArticleQuery
from portal.services.stats_service import StatsService
from portal.services.upload_service import UploadService
from portal.utils.permissions import login_required

ADMIN_PAGE_SIZE = 10

# ---------- 仪表盘 ----------

@cms_bp.route('/stats')
@login_required
def stats(identity):
    return jsonify(StatsService.dashboard())

# ---------- 文章管理 ----------

@cms_bp.route('/articles')
@login_required
def articles(identity):
    """文章列表：status / category / author / search / order_by / limit / offset"""
    args = request.args.to_dict()
    args.setdefault('limit', ADMIN_PAGE_SIZE)
    criteria = ArticleQuery.from_args(args)
    result = ArticleService.list_articles(criteria)
    return jsonify({
        'articles': [a.to_dict() for a in result['items']],
        'total': result['total'],
    })

@cms_bp.route('/articles/<int:id>')
@login_required
def article_detail(id, identity):
    return jsonify(ArticleService.get_article(id).to_dict())

@cms_bp.route('/articles', methods=['POST'])
@login_required
def create_article(identity):
    data = ArticleForm().validated()
    article = ArticleService.create_article(data, identity)
    return jsonify(article.to_dict()), 201

@cms_bp.route('/articles/<int:id>', methods=['PUT', 'PATCH'])
@login_required
def update_article(id, identity):
    patch = ArticleUpdateForm().validated()
    article = ArticleService.update_article(id, patch)
    return jsonify(article.to_dict())

@cms_bp.route('/articles/<int:id>', methods=['DELETE'])
@login_required
def delete_article(id, identity):
    ArticleService.delete_article(id)
    return jsonify({'message': 'Article deleted successfully'})

# ---------- 分类管理 ----------

@cms_bp.route('/categories')
@login_required
def categories(identity):
    return jsonify(CategoryService.list_with_counts())

@cms_bp.route('/categories/<int:id>')
@login_required
def category_detail(id, identity):
    return jsonify(CategoryService.get_category(id).to_dict())

@cms_bp.route('/categories', methods=['POST'])
@login_required
def create_category(identity):
    data = CategoryForm().validated()
    category = CategoryService.create_category(data)
    return jsonify(category.to_dict()), 201

@cms_bp.route('/categories/<int:id>', methods=['PUT', 'PATCH'])
@login_required
def update_category(id, identity):
    patch = CategoryUpdateForm().validated()
    category = CategoryService.update_category(id, patch)
    return jsonify(category.to_dict())

@cms_bp.route('/categories/<int:id>', methods=['DELETE'])
@login_required
def delete_category(id, identity):
    CategoryService.delete_category(id)
    return jsonify({'message': 'Category deleted successfully'})

# ---------- 文件上传 ----------

@cms_bp.route('/upload', methods=['POST'])
@login_required
def upload(identity):
    """上传图片（multipart 字段名 file）"""
    if 'file' not in request.files:
        raise ValidationError.for_field('file', 'No file uploaded')
    record = UploadService.create_upload(request.files['file'], identity)
    return jsonify(record.to_dict()), 201

@cms_bp.route('/uploads')
@login_required
def uploads(identity):
    """当前用户自己的上传记录"""
    return jsonify([u.to_dict() for u in UploadService.list_user_uploads(identity.id)])

@cms_bp.route('/uploads/<int:id>', methods=['DELETE'])
@login_required
def delete_upload(id, identity):
    UploadService.delete_upload(id, identity)
    return jsonify({'message': 'Upload deleted successfully'})
