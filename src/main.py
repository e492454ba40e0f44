"""
主程序入口
连接数据库、确认数据表后启动终端菜单
"""
import sys
import argparse
from database import Database
from errors import DatabaseConnectionError
from services import AppServices
from shell import TerminalUI


def parse_args(argv=None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description='学生选课管理系统',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python src/main.py                      # 启动终端菜单
  python src/main.py --init-db            # 只创建数据表
  python src/main.py --reset-db --yes     # 清空并重建所有数据表
  python src/main.py --database-url sqlite:///students.db
        """
    )

    parser.add_argument(
        '--database-url',
        help='SQLAlchemy 连接串（默认读取 .env 中的 DATABASE_URL 或 DB_* 配置）'
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '--init-db',
        action='store_true',
        help='创建数据表后退出'
    )
    group.add_argument(
        '--reset-db',
        action='store_true',
        help='删除并重建所有数据表后退出（会清空所有数据！）'
    )

    parser.add_argument(
        '--yes',
        action='store_true',
        help='配合 --reset-db 使用，跳过确认'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """主函数，返回进程退出码"""
    args = parse_args(argv)

    print("系统启动中...")

    # 1. 初始化数据库
    try:
        db = Database(args.database_url)
    except DatabaseConnectionError as e:
        print(f"\n✗ 系统启动失败：{e}")
        return 1

    if not db.test_connection():
        print("\n请检查数据库连接或 .env 配置！")
        return 1

    # 2. 重建 / 创建数据表
    if args.reset_db:
        if not args.yes:
            answer = input("⚠️ 将清空所有数据，确认继续？(y/N) ").strip().lower()
            if answer != 'y':
                print("已取消")
                return 0
        return 0 if db.reset_tables() else 1

    if not db.create_tables():
        print("\n数据表创建失败，请检查表结构是否正确！")
        return 1

    if args.init_db:
        return 0

    # 3. 初始化服务层并进入菜单
    services = AppServices(db.get_session())
    try:
        TerminalUI(services).run()
    finally:
        services.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
