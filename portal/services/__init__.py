from sqlalchemy.exc import IntegrityError

from portal.exceptions import Conflict
from portal.extensions import db


def commit_or_conflict(message):
    """
    提交当前事务；唯一约束冲突时回滚并抛出 Conflict
    其余数据库错误回滚后原样上抛，不做重试
    """
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict(message)
    except Exception:
        db.session.rollback()
        raise
