"""
数据库连接管理
"""
import os
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
from errors import DatabaseConnectionError
from models import Base

# 加载 .env 文件中的环境变量
load_dotenv()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite 默认不检查外键，每个连接建立时打开"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_database_url():
    """
    从环境变量构建数据库连接 URL

    优先使用 DATABASE_URL；否则由 DB_HOST/DB_PORT/DB_NAME/DB_USER/DB_PASSWORD
    拼出 MySQL 连接串。

    Returns:
        str: SQLAlchemy 连接 URL

    Raises:
        DatabaseConnectionError: 配置不完整
    """
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    db_host = os.getenv('DB_HOST')
    db_port = os.getenv('DB_PORT', '3306')
    db_name = os.getenv('DB_NAME')
    db_user = os.getenv('DB_USER')
    db_password = os.getenv('DB_PASSWORD')

    # 验证配置完整性
    if not all([db_host, db_name, db_user, db_password]):
        raise DatabaseConnectionError(
            "数据库配置不完整！请检查 .env 文件是否包含所有必需的配置：\n"
            "DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASSWORD（或直接设置 DATABASE_URL）"
        )

    return f"mysql+pymysql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


class Database:
    """数据库连接管理类"""

    def __init__(self, url=None):
        """
        Args:
            url: 可选，显式指定连接 URL（优先于环境变量）
        """
        self.url = url or build_database_url()
        self.engine = None
        self.Session = None
        self._init_engine()

    def _init_engine(self):
        """初始化数据库引擎"""
        options = {'echo': False}
        if not self.url.startswith('sqlite'):
            options.update(
                pool_pre_ping=True,      # 连接前先 ping，确保连接有效
                pool_recycle=3600,       # 1小时后回收连接
            )

        try:
            self.engine = create_engine(self.url, **options)
        except (SQLAlchemyError, ImportError) as e:
            raise DatabaseConnectionError(f"数据库引擎创建失败: {e}") from e

        if self.engine.dialect.name == 'sqlite':
            event.listen(self.engine, 'connect', _enable_sqlite_foreign_keys)

        # 单会话终端程序：提交后保留对象属性，避免逐行重新加载
        self.Session = sessionmaker(bind=self.engine, expire_on_commit=False)

    def test_connection(self):
        """测试数据库连接"""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                print("✓ 数据库连接成功！")
                print(f"数据库类型: {self.engine.dialect.name}")
                return True
        except SQLAlchemyError as e:
            print(f"✗ 数据库连接失败: {e}")
            return False

    def create_tables(self):
        """创建所有数据表（仅创建不存在的表）"""
        try:
            Base.metadata.create_all(self.engine)
            # 验证关键表是否存在
            existing_tables = inspect(self.engine).get_table_names()
            expected_tables = [t.name for t in Base.metadata.sorted_tables]
            missing = [t for t in expected_tables if t not in existing_tables]
            if missing:
                print(f"⚠️ 以下表未创建成功: {missing}")
                return False
            print(f"✓ 已确认 {len(expected_tables)} 张表存在: {expected_tables}")
            return True
        except SQLAlchemyError as e:
            print(f"✗ 创建数据表失败: {e}")
            return False

    def reset_tables(self):
        """删除并重建所有数据表（危险操作！会清空所有数据）"""
        try:
            print("正在删除所有表...")
            Base.metadata.drop_all(self.engine)
            print("正在重建所有表...")
            Base.metadata.create_all(self.engine)
            print("✓ 数据表重建成功！")
            return True
        except SQLAlchemyError as e:
            print(f"✗ 重建数据表失败: {e}")
            return False

    def get_session(self):
        """获取数据库会话"""
        return self.Session()
