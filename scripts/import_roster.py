#!/usr/bin/env python3
"""
名册导入脚本
从 YAML 文件读取教师、学生、课程、选课、成绩并导入数据库

使用方法：
  python scripts/import_roster.py --file data/roster/sample.yml
  python scripts/import_roster.py --file data/roster/sample.yml --validate
"""
import sys
import os
import argparse

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from database import Database
from errors import StudentSystemError, DatabaseConnectionError
from services import AppServices, RosterService


def parse_args():
    parser = argparse.ArgumentParser(
        description='导入名册数据（从 YAML 文件）',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python scripts/import_roster.py --file data/roster/sample.yml              # 导入
  python scripts/import_roster.py --file data/roster/sample.yml --validate   # 只校验（不需要数据库）
        """
    )
    parser.add_argument(
        '--file',
        required=True,
        metavar='PATH',
        help='名册 YAML 文件路径'
    )
    parser.add_argument(
        '--validate',
        action='store_true',
        help='仅校验 YAML 文件格式，不写入数据库'
    )
    return parser.parse_args()


def run_validate(yaml_path):
    """仅做 schema 校验，不连接数据库"""
    print("=" * 60)
    print("YAML 文件 Schema 校验")
    print("=" * 60)

    errors = RosterService.validate_yaml(yaml_path)
    if errors:
        print(f"✗ {os.path.basename(yaml_path)}")
        for msg in errors:
            print(msg)
        print("\n文件存在错误，请修复后再导入 ✗")
        sys.exit(1)

    print(f"✓ {os.path.basename(yaml_path)} 校验通过")


def main():
    """主函数"""
    args = parse_args()

    if not os.path.exists(args.file):
        print(f"⚠️ 未找到 YAML 文件: {args.file}")
        sys.exit(1)

    # --validate 模式：不需要数据库
    if args.validate:
        run_validate(args.file)
        return

    print("=" * 60)
    print("名册数据导入")
    print("=" * 60)

    # 1. 初始化数据库
    print("初始化数据库连接...")
    try:
        db = Database()
    except DatabaseConnectionError as e:
        print(f"\n✗ {e}")
        sys.exit(1)
    if not db.test_connection():
        print("\n数据库连接失败，请检查 .env 配置")
        sys.exit(1)

    # 确保表存在
    if not db.create_tables():
        print("\n数据表创建失败，程序终止")
        sys.exit(1)
    print()

    # 2. 导入
    services = AppServices(db.get_session())
    service = RosterService(services)
    try:
        service.import_from_yaml(args.file)
    except (StudentSystemError, ValueError) as e:
        print(f"✗ 导入失败: {e}")
        sys.exit(1)
    finally:
        services.close()


if __name__ == "__main__":
    main()
