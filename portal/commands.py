import random
import click
from flask.cli import with_appcontext
from portal.extensions import db
from portal.exceptions import Conflict
from portal.models import User, Category, Article, Upload
from portal.services.article_service import ArticleService
from portal.services.category_service import CategoryService
from portal.services.user_service import UserService
from portal.utils.fake_gen import fake
from portal.utils.permissions import Identity

DEFAULT_CATEGORIES = [
    ('Politik', 'Berita politik terkini dan analisis mendalam'),
    ('Ekonomi', 'Update ekonomi, bisnis, dan keuangan'),
    ('Teknologi', 'Perkembangan teknologi dan inovasi terbaru'),
    ('Olahraga', 'Berita olahraga dan pertandingan terkini'),
    ('Kesehatan', 'Tips kesehatan dan berita medis terkini'),
]

# (标题, 摘要, 分类 slug, 作者, 状态)
SAMPLE_ARTICLES = [
    ('Perkembangan Teknologi AI di Indonesia Tahun 2024',
     'Indonesia mengalami pertumbuhan signifikan dalam adopsi teknologi artificial intelligence di berbagai sektor.',
     'teknologi', 'editor', Article.STATUS_PUBLISHED),
    ('Pertumbuhan Ekonomi Digital Indonesia Mencapai Rekor Tertinggi',
     'Sektor ekonomi digital Indonesia tumbuh pesat dan menjadi salah satu kontributor utama pertumbuhan ekonomi nasional.',
     'ekonomi', 'admin', Article.STATUS_PUBLISHED),
    ('Tim Nasional Indonesia Meraih Prestasi Gemilang di Turnamen Asia',
     'Prestasi membanggakan diraih tim nasional Indonesia dalam turnamen bergengsi di kawasan Asia.',
     'olahraga', 'editor', Article.STATUS_PUBLISHED),
    ('Kebijakan Baru Pemerintah dalam Mendukung UMKM Digital',
     'Pemerintah meluncurkan serangkaian kebijakan baru untuk mendorong transformasi digital UMKM di seluruh Indonesia.',
     'politik', 'admin', Article.STATUS_PUBLISHED),
    ('Inovasi Startup Indonesia di Bidang Healthcare Technology',
     'Startup Indonesia mengembangkan solusi healthcare technology yang inovatif untuk meningkatkan akses layanan kesehatan.',
     'kesehatan', 'editor', Article.STATUS_PUBLISHED),
    ('Tips Menjaga Kesehatan Mental di Era Digital',
     'Panduan praktis untuk menjaga kesehatan mental di tengah pesatnya perkembangan teknologi digital.',
     'kesehatan', 'admin', Article.STATUS_DRAFT),
]


@click.command('status')
@with_appcontext
def status():
    """查看当前数据库中的数据统计"""
    click.echo(click.style('📊 News Portal 数据库状态:', fg='cyan', bold=True))

    click.echo(f" - 用户 (Users): \t{User.query.count()}")
    click.echo(f" - 分类 (Categories): \t{Category.query.count()}")
    click.echo(f" - 文章 (Articles): \t{Article.query.count()}")
    click.echo(f" - 上传 (Uploads): \t{Upload.query.count()}")

    if User.query.count() == 0:
        click.echo(click.style('⚠ 数据库为空，请运行 flask seed 生成数据。', fg='yellow'))


@click.command('seed')
@click.option('--fake', 'fake_count', default=0, help='额外生成的随机文章数量')
@with_appcontext
def seed(fake_count):
    """
    初始化默认账号、分类与示例文章。
    数据库已有用户时跳过默认数据，仅追加 --fake 指定的随机文章。
    """
    db.create_all()

    if User.query.count() == 0:
        click.echo('正在创建默认账号...')
        init_users()
        click.echo('正在创建分类...')
        init_categories()
        click.echo('正在发布示例文章...')
        init_articles()
        click.echo(click.style('✔ 默认数据构建完成！', fg='green', bold=True))
        click.echo("管理员账号: admin / 密码: admin123")
    else:
        click.echo(click.style('数据库已有数据，跳过默认数据。', fg='yellow'))

    if fake_count:
        created = init_fake_articles(fake_count)
        click.echo(f'  ✓ 已生成 {created} 篇随机文章')


@click.command('create-admin')
@click.argument('username')
@click.password_option()
@with_appcontext
def create_admin(username, password):
    """创建管理员账号"""
    try:
        UserService.create_user({'username': username, 'password': password, 'role': User.ROLE_ADMIN})
    except Conflict as e:
        raise click.ClickException(e.message)
    click.echo(click.style(f'✔ 管理员 {username} 创建成功', fg='green'))


def init_users():
    UserService.create_user({
        'username': 'admin', 'password': 'admin123', 'email': 'admin@newsportal.com',
        'first_name': 'Admin', 'last_name': 'User', 'role': User.ROLE_ADMIN,
    })
    UserService.create_user({
        'username': 'editor', 'password': 'editor123', 'email': 'editor@newsportal.com',
        'first_name': 'Editor', 'last_name': 'User', 'role': User.ROLE_EDITOR,
    })


def init_categories():
    for name, description in DEFAULT_CATEGORIES:
        CategoryService.create_category({'name': name, 'description': description})


def init_articles():
    for title, excerpt, category_slug, username, article_status in SAMPLE_ARTICLES:
        author = User.query.filter_by(username=username).first()
        category = CategoryService.get_category_by_slug(category_slug)
        ArticleService.create_article({
            'title': title,
            'excerpt': excerpt,
            'content': fake.html_body(),
            'category_id': category.id,
            'status': article_status,
        }, Identity.from_user(author))


def init_fake_articles(count):
    """随机文章：标题撞车时跳过"""
    authors = User.query.all()
    categories = Category.query.all()
    if not authors or not categories:
        return 0

    created = 0
    for _ in range(count):
        try:
            ArticleService.create_article({
                'title': fake.headline(),
                'excerpt': fake.sentence(nb_words=16),
                'content': fake.html_body(paragraphs=random.randint(2, 6)),
                'category_id': random.choice(categories).id,
                'status': random.choice(Article.STATUSES),
            }, Identity.from_user(random.choice(authors)))
            created += 1
        except Conflict:
            continue
    return created
