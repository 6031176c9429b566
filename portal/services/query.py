"""
文章查询构建器
把 筛选 / 搜索 / 排序 / 分页 参数翻译成列表查询与总数查询
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import joinedload

from portal.exceptions import ValidationError
from portal.models import Article


class ArticleStatus(str, Enum):
    DRAFT = Article.STATUS_DRAFT
    PUBLISHED = Article.STATUS_PUBLISHED


class OrderBy(str, Enum):
    NEWEST = 'newest'
    OLDEST = 'oldest'
    TITLE = 'title'


def _parse_enum(enum_cls, value, field):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(m.value for m in enum_cls)
        raise ValidationError.for_field(field, f'Must be one of: {allowed}')


def _parse_int(value, field):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError.for_field(field, 'Must be an integer')
    if number < 0:
        raise ValidationError.for_field(field, 'Must not be negative')
    return number


@dataclass(frozen=True)
class ArticleQuery:
    """文章列表查询条件（所有筛选项可选，可任意组合）"""
    status: Optional[ArticleStatus] = None
    category_id: Optional[int] = None
    author_id: Optional[int] = None
    search: Optional[str] = None
    order_by: OrderBy = OrderBy.NEWEST
    limit: Optional[int] = None
    offset: int = 0

    @classmethod
    def from_args(cls, args, **fixed):
        """
        从请求参数解析查询条件
        args 中的 category / author 为 ID；fixed 中的值覆盖 args
        """
        values = {}
        if args.get('status'):
            values['status'] = _parse_enum(ArticleStatus, args['status'], 'status')
        if args.get('category'):
            values['category_id'] = _parse_int(args['category'], 'category')
        if args.get('author'):
            values['author_id'] = _parse_int(args['author'], 'author')
        if args.get('search'):
            values['search'] = args['search'].strip() or None
        if args.get('order_by'):
            values['order_by'] = _parse_enum(OrderBy, args['order_by'], 'order_by')
        if args.get('limit') not in (None, ''):
            values['limit'] = _parse_int(args['limit'], 'limit')
        if args.get('offset') not in (None, ''):
            values['offset'] = _parse_int(args['offset'], 'offset')
        values.update(fixed)
        return cls(**values)

    def published(self):
        """公开列表：固定为已发布 + 最新优先"""
        return replace(self, status=ArticleStatus.PUBLISHED, order_by=OrderBy.NEWEST)


def apply_filters(query, criteria):
    if criteria.status is not None:
        query = query.filter(Article.status == ArticleStatus(criteria.status).value)
    if criteria.category_id is not None:
        query = query.filter(Article.category_id == criteria.category_id)
    if criteria.author_id is not None:
        query = query.filter(Article.author_id == criteria.author_id)
    if criteria.search:
        query = query.filter(or_(
            Article.title.icontains(criteria.search, autoescape=True),
            Article.content.icontains(criteria.search, autoescape=True),
        ))
    return query


def apply_ordering(query, order_by):
    # id 作为次级排序，保证同一时间戳下分页稳定
    order_by = OrderBy(order_by)
    if order_by is OrderBy.OLDEST:
        return query.order_by(Article.created_at.asc(), Article.id.asc())
    if order_by is OrderBy.TITLE:
        return query.order_by(Article.title.asc(), Article.id.asc())
    return query.order_by(Article.created_at.desc(), Article.id.desc())


def build(criteria):
    """
    返回 (items_query, count_query)
    count_query 统计整个筛选结果集，不受 limit / offset 影响
    """
    filtered = apply_filters(Article.query, criteria)

    items = filtered.options(joinedload(Article.category), joinedload(Article.author))
    items = apply_ordering(items, criteria.order_by)
    if criteria.offset:
        items = items.offset(criteria.offset)
    # limit 为 0 或缺省时不分页
    if criteria.limit:
        items = items.limit(criteria.limit)

    return items, filtered
