from datetime import datetime
from portal.extensions import db

class BaseModel(db.Model):
    """
    门户模型基类
    包含：ID主键, 创建时间, 更新时间, 持久化与序列化方法
    """
    __abstract__ = True

    # 序列化时需要隐藏的列
    __hidden_fields__ = ()

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def save(self):
        """保存到数据库"""
        db.session.add(self)
        db.session.commit()

    def delete(self):
        """物理删除"""
        db.session.delete(self)
        db.session.commit()

    def to_dict(self):
        """
        通用序列化方法：将模型转换为字典，便于 API 返回 JSON。
        过滤掉以 '_' 开头的私有属性以及 __hidden_fields__ 中声明的列。
        """
        data = {}
        for c in self.__table__.columns:
            if c.name.startswith('_') or c.name in self.__hidden_fields__:
                continue
            val = getattr(self, c.name)
            if isinstance(val, datetime):
                data[c.name] = val.isoformat()
            else:
                data[c.name] = val
        return data
