from portal.extensions import db
from .base import BaseModel

class Category(BaseModel):
    """文章分类"""
    __tablename__ = 'categories'

    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False, index=True)
    description = db.Column(db.Text)

    articles = db.relationship('Article', back_populates='category', lazy='dynamic')

    def __repr__(self):
        return f'<Category {self.slug}>'

class Article(BaseModel):
    """新闻文章"""
    __tablename__ = 'articles'

    STATUS_DRAFT = 'draft'
    STATUS_PUBLISHED = 'published'
    STATUSES = (STATUS_DRAFT, STATUS_PUBLISHED)

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    excerpt = db.Column(db.Text)
    content = db.Column(db.Text, nullable=False)  # HTML 内容
    featured_image = db.Column(db.String(255))

    category_id = db.Column(db.Integer, db.ForeignKey('categories.id'), nullable=False, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default=STATUS_DRAFT, index=True)
    published_at = db.Column(db.DateTime)

    category = db.relationship('Category', back_populates='articles')
    author = db.relationship('User', back_populates='articles')

    @property
    def is_published(self):
        return self.status == self.STATUS_PUBLISHED

    def to_dict(self, with_relations=True):
        """序列化文章，默认附带完整的分类与作者信息"""
        data = super().to_dict()
        if with_relations:
            data['category'] = self.category.to_dict() if self.category else None
            data['author'] = self.author.to_dict() if self.author else None
        return data

    def __repr__(self):
        return f'<Article {self.slug}>'

class Upload(BaseModel):
    """上传文件元数据"""
    __tablename__ = 'uploads'

    file_name = db.Column(db.String(255), nullable=False)  # 生成的存储文件名
    original_name = db.Column(db.String(255), nullable=False)
    file_path = db.Column(db.String(500), nullable=False)  # 公开访问路径
    mime_type = db.Column(db.String(100))
    size = db.Column(db.Integer)  # 字节数

    uploaded_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    uploader = db.relationship('User', back_populates='uploads')
