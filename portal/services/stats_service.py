from portal.models import Article, Category, User


class StatsService:
    """后台仪表盘统计"""

    @staticmethod
    def dashboard():
        return {
            'total_articles': Article.query.count(),
            'published_articles': Article.query.filter_by(status=Article.STATUS_PUBLISHED).count(),
            'draft_articles': Article.query.filter_by(status=Article.STATUS_DRAFT).count(),
            'total_users': User.query.count(),
            'total_categories': Category.query.count(),
        }
