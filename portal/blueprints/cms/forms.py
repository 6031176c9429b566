from wtforms import SelectField
from wtforms.validators import DataRequired, Length

from portal.models import Article
from portal.utils.forms import ApiForm, PatchForm, IdField, TextField, TextBlockField
from portal.utils.validators import NullableOptional, validate_slug_format

class ArticleForm(ApiForm):
    """文章创建表单"""
    title = TextField('Title', validators=[DataRequired(), Length(max=255)])
    slug = TextField('Slug', validators=[NullableOptional(), Length(max=255), validate_slug_format])
    excerpt = TextBlockField('Excerpt', validators=[NullableOptional()])
    # content 存储富文本编辑器生成的 HTML
    content = TextBlockField('Content', validators=[DataRequired()])
    featured_image = TextField('Featured image', validators=[NullableOptional(), Length(max=255)])
    category_id = IdField('Category', validators=[DataRequired()])
    status = SelectField('Status', choices=[
        (Article.STATUS_DRAFT, 'Draft'),
        (Article.STATUS_PUBLISHED, 'Published')
    ], default=Article.STATUS_DRAFT)

class ArticleUpdateForm(PatchForm, ArticleForm):
    """文章局部更新表单"""

class CategoryForm(ApiForm):
    """分类创建表单"""
    name = TextField('Name', validators=[DataRequired(), Length(max=100)])
    slug = TextField('Slug', validators=[NullableOptional(), Length(max=100), validate_slug_format])
    description = TextBlockField('Description', validators=[NullableOptional()])

class CategoryUpdateForm(PatchForm, CategoryForm):
    """分类局部更新表单"""
