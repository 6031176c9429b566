from flask import current_app
from sqlalchemy import func

from portal.exceptions import Conflict, NotFound, ValidationError
from portal.extensions import db, cache
from portal.models import Article, Category
from portal.services import commit_or_conflict
from portal.utils.slug import slug_or_derive

CATEGORY_COUNTS_KEY = 'categories_with_count'


class CategoryService:
    """分类管理服务"""

    @staticmethod
    def invalidate_counts():
        """分类或文章变动后清除分类计数缓存"""
        cache.delete(CATEGORY_COUNTS_KEY)

    @staticmethod
    def get_category(category_id):
        category = db.session.get(Category, category_id)
        if category is None:
            raise NotFound('Category not found')
        return category

    @staticmethod
    def get_category_by_slug(slug):
        category = Category.query.filter_by(slug=slug).first()
        if category is None:
            raise NotFound('Category not found')
        return category

    @staticmethod
    def find_by_slug(slug):
        """按 slug 查找，不存在时返回 None"""
        return Category.query.filter_by(slug=slug).first()

    @staticmethod
    def list_categories():
        return Category.query.order_by(Category.name.asc()).all()

    @staticmethod
    def list_with_counts():
        """
        所有分类及其文章数（含草稿），按名称升序
        返回可直接序列化的字典列表（结果走 Flask-Caching 缓存）
        """
        cached = cache.get(CATEGORY_COUNTS_KEY)
        if cached is not None:
            return cached

        rows = db.session.query(Category, func.count(Article.id)) \
            .outerjoin(Article, Article.category_id == Category.id) \
            .group_by(Category.id) \
            .order_by(Category.name.asc()) \
            .all()
        result = []
        for category, article_count in rows:
            data = category.to_dict()
            data['article_count'] = article_count
            result.append(data)
        cache.set(CATEGORY_COUNTS_KEY, result)
        return result

    @staticmethod
    def create_category(data):
        slug = slug_or_derive(data.get('slug'), data.get('name'))
        if not slug:
            raise ValidationError.for_field('slug', 'Slug cannot be empty')

        category = Category(
            name=data['name'],
            slug=slug,
            description=data.get('description'),
        )
        db.session.add(category)
        commit_or_conflict('Category slug already exists')
        CategoryService.invalidate_counts()
        current_app.logger.info(f'category created: {category.slug}')
        return category

    @staticmethod
    def update_category(category_id, patch):
        """
        局部更新：patch 中只包含调用方提供的字段
        修改名称但未给 slug 时重新生成 slug
        """
        category = CategoryService.get_category(category_id)

        slug = None
        if patch.get('slug') or patch.get('name'):
            slug = slug_or_derive(patch.get('slug'), patch.get('name'))
            if not slug:
                raise ValidationError.for_field('slug', 'Slug cannot be empty')

        if 'name' in patch:
            category.name = patch['name']
        if 'description' in patch:
            category.description = patch['description']
        if slug:
            category.slug = slug

        commit_or_conflict('Category slug already exists')
        CategoryService.invalidate_counts()
        current_app.logger.info(f'category updated: {category.slug}')
        return category

    @staticmethod
    def delete_category(category_id):
        """仍有文章引用的分类拒绝删除"""
        category = CategoryService.get_category(category_id)
        in_use = category.articles.count()
        if in_use:
            raise Conflict(
                'Category still has articles',
                payload={'article_count': in_use},
            )
        db.session.delete(category)
        db.session.commit()
        CategoryService.invalidate_counts()
        current_app.logger.info(f'category deleted: {category.slug}')
