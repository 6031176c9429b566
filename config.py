import os
from datetime import timedelta
from dotenv import load_dotenv

# 加载 .env 环境变量
load_dotenv()
basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    """基础配置类"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'news-portal-secret-key'

    # 数据库配置
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 会话配置 (签名 Cookie，24 小时有效)
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # 文件上传配置
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'uploads')
    UPLOAD_MAX_SIZE = 5 * 1024 * 1024  # 单个图片最大 5MB
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 整个请求最大 16MB
    ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}

    # 公开接口默认分页大小
    PUBLIC_PAGE_SIZE = 10

    # 缓存配置：SimpleCache 只在单进程内有效，多 worker 部署需设为共享缓存 (如 RedisCache)
    CACHE_TYPE = os.environ.get('CACHE_TYPE') or 'SimpleCache'
    CACHE_REDIS_URL = os.environ.get('CACHE_REDIS_URL')
    CACHE_DEFAULT_TIMEOUT = 300

    @staticmethod
    def init_app(app):
        # 确保上传目录存在
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

class DevelopmentConfig(Config):
    """开发环境配置"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'news_portal.db')

class ProductionConfig(Config):
    """生产环境配置"""
    DEBUG = False

    DATABASE_URL = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'news_portal_prod.db')
    # PostgreSQL URL 修正（部分平台使用 postgres://）
    if DATABASE_URL and DATABASE_URL.startswith('postgres://'):
        DATABASE_URL = DATABASE_URL.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_DATABASE_URI = DATABASE_URL

    # 安全设置
    SESSION_COOKIE_SECURE = True

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)
        if app.config['CACHE_TYPE'] in ('SimpleCache', 'simple'):
            # 各 worker 的分类文章数缓存互不可见，写入后其他进程会读到旧值
            app.logger.warning('CACHE_TYPE=SimpleCache is per-process; set a shared cache such as RedisCache for multi-worker deployments')

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
