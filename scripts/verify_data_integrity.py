#!/usr/bin/env python3
"""
数据完整性检查脚本
检查数据库中违反约束的记录：悬空选课、无选课的成绩、教师不存在的课程、越界学分/成绩
"""
import sys
import os
import argparse

# 添加 src 目录到 Python 路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from database import Database
from errors import DatabaseConnectionError
from services import DataIntegrityChecker

SECTIONS = [
    ('orphan_enrollments', '选课记录指向不存在的学生/课程',
     lambda item: f"学生 {item[0]} → 课程 {item[1]}"),
    ('scores_without_enrollment', '成绩没有对应的选课记录',
     lambda item: f"学生 {item[0]} / 课程 {item[1]}"),
    ('courses_missing_teacher', '课程的授课教师不存在',
     lambda item: f"课程 {item[0]}（教师 {item[1]}）"),
    ('invalid_credits', '学分不在 1-10 之间',
     lambda item: f"课程 {item[0]}: {item[1]}"),
    ('invalid_scores', '成绩不在 0-100 之间',
     lambda item: f"学生 {item[0]} / 课程 {item[1]}: {item[2]}"),
]


def print_report(issues):
    """打印汇总报告，返回是否发现问题"""
    print(f"\n{'='*70}")
    print(f"{'数据完整性检查报告':^70}")
    print(f"{'='*70}\n")

    has_issues = False
    for idx, (key, title, describe) in enumerate(SECTIONS, 1):
        items = issues[key]
        if not items:
            print(f"✓ {title}: 无")
            continue
        has_issues = True
        print(f"【问题 {idx}】{title} ({len(items)} 条)")
        print("-" * 70)
        for item in items[:20]:
            print(f"  • {describe(item)}")
        if len(items) > 20:
            print(f"  ... 还有 {len(items) - 20} 条")
        print()

    print("=" * 70)
    if has_issues:
        print(f"{'✗ 发现数据不一致，请检查上述问题':^70}")
    else:
        print(f"{'✓ 所有数据满足约束！':^70}")
    print("=" * 70)
    return has_issues


def parse_args():
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description='检查学生选课数据库的数据完整性'
    )
    parser.add_argument(
        '--database-url',
        help='SQLAlchemy 连接串（默认读取 .env 配置）'
    )
    return parser.parse_args()


def main():
    """主函数"""
    args = parse_args()

    try:
        db = Database(args.database_url)
    except DatabaseConnectionError as e:
        print(f"✗ {e}")
        sys.exit(1)
    if not db.test_connection():
        sys.exit(1)

    session = db.get_session()
    try:
        issues = DataIntegrityChecker(session).run()
    finally:
        session.close()

    if print_report(issues):
        sys.exit(1)


if __name__ == "__main__":
    main()
