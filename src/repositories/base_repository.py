"""
Repository 公共基类
负责会话持有和事务边界
"""
from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from errors import TransactionError


class BaseRepository:
    """数据访问基类"""

    def __init__(self, session):
        """
        初始化 Repository

        Args:
            session: SQLAlchemy 数据库会话（所有 repository 共享同一个）
        """
        self.session = session

    @contextmanager
    def transaction(self, action):
        """
        在一个事务内执行若干语句

        正常结束时提交；数据库错误回滚后包装为 TransactionError，
        其他异常（含业务异常）回滚后原样抛出，
        保证级联删除不会部分提交。

        Args:
            action: 操作描述，用于错误信息（如 "删除学生"）
        """
        try:
            yield self.session
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise TransactionError(f"{action}失败：{e}") from e
        except Exception:
            self.session.rollback()
            raise
