from flask import jsonify, request, current_app, send_from_directory

from portal.blueprints.main import main_bp
from portal.services.article_service import ArticleService
from portal.services.category_service import CategoryService
from portal.services.query import ArticleQuery

@main_bp.route('/articles')
def articles():
    """已发布文章列表（分类 slug / 关键字 / 分页）"""
    category_id = None
    category_slug = request.args.get('category', '', type=str)
    if category_slug:
        # 未知分类忽略该筛选条件
        category = CategoryService.find_by_slug(category_slug)
        if category:
            category_id = category.id

    args = {
        'search': request.args.get('search'),
        'limit': request.args.get('limit', current_app.config['PUBLIC_PAGE_SIZE']),
        'offset': request.args.get('offset', 0),
    }
    criteria = ArticleQuery.from_args(args, category_id=category_id).published()
    result = ArticleService.list_articles(criteria)
    return jsonify({
        'articles': [a.to_dict() for a in result['items']],
        'total': result['total'],
    })

@main_bp.route('/articles/featured/latest')
def featured_article():
    """头条：最新发布的一篇"""
    article = ArticleService.get_featured()
    return jsonify(article.to_dict() if article else None)

@main_bp.route('/articles/<slug>')
def article_detail(slug):
    """文章详情（草稿不对外公开）"""
    article = ArticleService.get_published_by_slug(slug)
    return jsonify(article.to_dict())

@main_bp.route('/articles/<int:id>/related')
def related_articles(id):
    """相关文章：同分类最多 4 篇"""
    article = ArticleService.get_article(id)
    related = ArticleService.get_related(article)
    return jsonify([a.to_dict() for a in related])

@main_bp.route('/categories')
def categories():
    """分类列表（附文章数）"""
    return jsonify(CategoryService.list_with_counts())

@main_bp.route('/categories/<slug>')
def category_detail(slug):
    category = CategoryService.get_category_by_slug(slug)
    return jsonify(category.to_dict())

@main_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """访问已上传的图片"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
