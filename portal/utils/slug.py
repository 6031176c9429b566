"""
Slug 生成工具
将标题 / 名称转换为 URL 安全的小写连字符标识
"""
import re

_INVALID_CHARS = re.compile(r'[^\w\s-]', re.ASCII)
_SEPARATORS = re.compile(r'[\s_-]+', re.ASCII)


def slugify(text):
    """
    生成 slug（纯函数，不保证唯一性，唯一性由数据库约束负责）

    >>> slugify('AI & Indonesia 2024!')
    'ai-indonesia-2024'
    """
    if not text:
        return ''
    value = text.lower().strip()
    value = _INVALID_CHARS.sub('', value)
    value = _SEPARATORS.sub('-', value)
    return value.strip('-')


def slug_or_derive(explicit, source):
    """有显式 slug 时规范化后使用，否则由 source 推导"""
    if explicit:
        return slugify(explicit)
    return slugify(source)
