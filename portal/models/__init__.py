# 按照依赖顺序导入
from .base import BaseModel
from .auth import User
from .content import Category, Article, Upload
