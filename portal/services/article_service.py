from datetime import datetime

from flask import current_app
from sqlalchemy.orm import joinedload

from portal.exceptions import NotFound, ValidationError
from portal.extensions import db
from portal.models import Article, Category
from portal.services import commit_or_conflict, query as article_query
from portal.services.category_service import CategoryService
from portal.services.query import ArticleQuery
from portal.utils.slug import slug_or_derive

# 局部更新时允许直接写入的字段
EDITABLE_FIELDS = ('title', 'excerpt', 'content', 'featured_image', 'category_id', 'status')


class ArticleService:
    """文章内容服务：增删改查 + 列表筛选 + 发布时间戳"""

    @staticmethod
    def _hydrated():
        return Article.query.options(joinedload(Article.category), joinedload(Article.author))

    @staticmethod
    def get_article(article_id):
        article = ArticleService._hydrated().filter(Article.id == article_id).first()
        if article is None:
            raise NotFound('Article not found')
        return article

    @staticmethod
    def get_article_by_slug(slug):
        article = ArticleService._hydrated().filter(Article.slug == slug).first()
        if article is None:
            raise NotFound('Article not found')
        return article

    @staticmethod
    def get_published_by_slug(slug):
        """公开详情：草稿与不存在同样视为 404"""
        article = ArticleService.get_article_by_slug(slug)
        if not article.is_published:
            raise NotFound('Article not found')
        return article

    @staticmethod
    def list_articles(criteria=None):
        """
        按条件查询文章
        :param criteria: ArticleQuery
        :return: {'items': [Article], 'total': int}
        """
        criteria = criteria or ArticleQuery()
        items_query, count_query = article_query.build(criteria)
        return {
            'items': items_query.all(),
            'total': count_query.count(),
        }

    @staticmethod
    def list_published(category_id=None, search=None, limit=None, offset=0):
        criteria = ArticleQuery(
            category_id=category_id, search=search, limit=limit, offset=offset
        ).published()
        return ArticleService.list_articles(criteria)

    @staticmethod
    def get_featured():
        """最新发布的一篇文章，没有时返回 None"""
        result = ArticleService.list_published(limit=1)
        return result['items'][0] if result['items'] else None

    @staticmethod
    def get_related(article, limit=4):
        """同分类下的其它已发布文章，最新优先"""
        return ArticleService._hydrated().filter(
            Article.status == Article.STATUS_PUBLISHED,
            Article.category_id == article.category_id,
            Article.id != article.id,
        ).order_by(Article.created_at.desc(), Article.id.desc()).limit(limit).all()

    @staticmethod
    def _check_category(category_id):
        if db.session.get(Category, category_id) is None:
            raise ValidationError.for_field('category_id', 'Category does not exist')

    @staticmethod
    def create_article(data, identity):
        """
        创建文章，作者为当前身份
        未提供 slug 时由标题生成；直接发布则记录发布时间
        """
        slug = slug_or_derive(data.get('slug'), data.get('title'))
        if not slug:
            raise ValidationError.for_field('slug', 'Slug cannot be empty')
        ArticleService._check_category(data['category_id'])

        status = data.get('status') or Article.STATUS_DRAFT
        article = Article(
            title=data['title'],
            slug=slug,
            excerpt=data.get('excerpt'),
            content=data['content'],
            featured_image=data.get('featured_image'),
            category_id=data['category_id'],
            author_id=identity.id,
            status=status,
            published_at=datetime.utcnow() if status == Article.STATUS_PUBLISHED else None,
        )
        db.session.add(article)
        commit_or_conflict('Article slug already exists')
        CategoryService.invalidate_counts()
        current_app.logger.info(f'article created: {article.slug} by {identity.username}')
        return article

    @staticmethod
    def update_article(article_id, patch):
        """
        局部更新：只修改 patch 中出现的字段
        仅在 草稿 -> 发布 时写入 published_at，之后不再变动
        """
        article = ArticleService.get_article(article_id)

        slug = None
        if patch.get('slug') or patch.get('title'):
            slug = slug_or_derive(patch.get('slug'), patch.get('title'))
            if not slug:
                raise ValidationError.for_field('slug', 'Slug cannot be empty')
        if 'category_id' in patch:
            ArticleService._check_category(patch['category_id'])

        previous_status = article.status
        for field in EDITABLE_FIELDS:
            if field in patch:
                setattr(article, field, patch[field])
        if slug:
            article.slug = slug

        if article.status == Article.STATUS_PUBLISHED and previous_status != Article.STATUS_PUBLISHED:
            article.published_at = datetime.utcnow()

        commit_or_conflict('Article slug already exists')
        CategoryService.invalidate_counts()
        current_app.logger.info(f'article updated: {article.slug} ({previous_status} -> {article.status})')
        return article

    @staticmethod
    def delete_article(article_id):
        article = ArticleService.get_article(article_id)
        db.session.delete(article)
        db.session.commit()
        CategoryService.invalidate_counts()
        current_app.logger.info(f'article deleted: {article.slug}')
