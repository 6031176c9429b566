import logging
import colorlog
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from config import config
from portal.extensions import db, migrate, login_manager, cache, csrf
from portal.exceptions import PortalException

# 导入 commands 模块，用于注册 CLI 命令
from portal import commands


def create_app(config_name='default', overrides=None):
    """新闻门户应用工厂函数"""
    app = Flask(__name__)

    # 1. 加载配置
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)
    config[config_name].init_app(app)

    # 2. 初始化扩展
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    cache.init_app(app)
    csrf.init_app(app)

    # 3. 配置日志
    configure_logging(app)

    # 4. 注册蓝图 (Blueprints)
    register_blueprints(app)

    # 5. 注册全局错误处理
    register_error_handlers(app)

    # 6. 注册 CLI 命令
    register_commands(app)

    return app


def register_blueprints(app):
    """注册所有业务模块蓝图"""
    # 认证接口
    from portal.blueprints.auth import auth_bp
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    # 公开阅读接口 (含已上传图片访问)
    from portal.blueprints.main import main_bp
    app.register_blueprint(main_bp, url_prefix='/api')

    # 后台内容管理
    from portal.blueprints.cms import cms_bp
    app.register_blueprint(cms_bp, url_prefix='/api/admin')

    # 后台用户管理
    from portal.blueprints.system import system_bp
    app.register_blueprint(system_bp, url_prefix='/api/admin')


def register_error_handlers(app):
    """所有异常统一转换为 JSON 响应"""

    @app.errorhandler(PortalException)
    def handle_portal_exception(e):
        db.session.rollback()
        return jsonify(e.to_dict()), e.code

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({
            'success': False,
            'code': e.code,
            'message': e.description,
        }), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_exception(e):
        db.session.rollback()
        app.logger.exception(f'Unhandled error: {e}')
        return jsonify({
            'success': False,
            'code': 500,
            'message': 'Internal server error',
        }), 500


def register_commands(app):
    """注册 Flask CLI 命令"""
    app.cli.add_command(commands.seed)
    app.cli.add_command(commands.status)
    app.cli.add_command(commands.create_admin)


def configure_logging(app):
    """配置彩色控制台日志，提升开发体验"""
    app.logger.setLevel(logging.INFO)
    if app.debug:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)

        formatter = colorlog.ColoredFormatter(
            "%(log_color)s[%(asctime)s] %(levelname)-8s%(reset)s %(blue)s%(message)s",
            datefmt="%H:%M:%S",
            reset=True,
            log_colors={
                'DEBUG':    'cyan',
                'INFO':     'green',
                'WARNING':  'yellow',
                'ERROR':    'red',
                'CRITICAL': 'red,bg_white',
            },
            secondary_log_colors={},
            style='%'
        )
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
