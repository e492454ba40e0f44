"""
名册批量导入服务
从 YAML 文件读取教师、学生、课程、选课和成绩并写入数据库
"""
import json
import os
import yaml
from jsonschema import Draft7Validator
from errors import AlreadyEnrolledError


_SCHEMA_PATH = os.path.join(
    os.path.dirname(__file__),
    '..', '..', 'data', 'roster', 'schema.json'
)

_SCHEMA = None


def _load_schema():
    path = os.path.normpath(_SCHEMA_PATH)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


class RosterService:
    """名册导入服务"""

    @staticmethod
    def validate_data(data):
        """
        校验已解析的名册数据是否符合 schema

        Returns:
            list[str]: 校验错误列表，空列表表示通过
        """
        global _SCHEMA
        if _SCHEMA is None:
            _SCHEMA = _load_schema()

        validator = Draft7Validator(_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))

        messages = []
        for err in errors:
            path = ' -> '.join(str(p) for p in err.absolute_path) or '(root)'
            messages.append(f"  [{path}] {err.message}")

        return messages

    @staticmethod
    def validate_yaml(yaml_path):
        """
        校验一个名册 YAML 文件

        Args:
            yaml_path: YAML 文件路径

        Returns:
            list[str]: 校验错误列表
        """
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        return RosterService.validate_data(data)

    def __init__(self, services):
        """
        Args:
            services: AppServices 实例
        """
        self.services = services

    def import_from_yaml(self, yaml_path):
        """
        从 YAML 文件导入名册

        流程：
        1. 校验 schema（失败时不写入任何数据）
        2. 按依赖顺序导入：教师 → 学生 → 课程 → 选课 → 成绩
        3. 已存在的实体和已存在的选课记录跳过

        Args:
            yaml_path: YAML 文件路径

        Returns:
            dict: 统计信息
        """
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        errors = RosterService.validate_data(data)
        if errors:
            error_msg = '\n'.join(errors)
            raise ValueError(f"YAML 文件校验失败：{yaml_path}\n{error_msg}")

        return self.import_data(data)

    def check_references(self, data):
        """
        写库前检查名册内的引用关系

        引用目标可以来自名册本身，也可以是数据库中已存在的记录：
        - 课程的授课教师必须存在
        - 选课的学生、课程必须存在
        - 成绩必须对应一条选课记录

        Returns:
            list[str]: 问题列表，空列表表示通过
        """
        services = self.services
        teacher_ids = {t['id'] for t in data.get('teachers', [])}
        student_ids = {s['id'] for s in data.get('students', [])}
        course_ids = {c['id'] for c in data.get('courses', [])}
        enrolled = {(e['student_id'], e['course_id']) for e in data.get('enrollments', [])}

        messages = []
        for idx, item in enumerate(data.get('courses', [])):
            tid = item['teacher_id']
            if tid not in teacher_ids and not services.teachers.repository.exists(tid):
                messages.append(f"  [courses -> {idx}] 授课教师【{tid}】不存在")

        for idx, item in enumerate(data.get('enrollments', [])):
            sid, cid = item['student_id'], item['course_id']
            if sid not in student_ids and not services.students.repository.exists(sid):
                messages.append(f"  [enrollments -> {idx}] 学生【{sid}】不存在")
            if cid not in course_ids and not services.courses.repository.exists(cid):
                messages.append(f"  [enrollments -> {idx}] 课程【{cid}】不存在")

        for idx, item in enumerate(data.get('scores', [])):
            pair = (item['student_id'], item['course_id'])
            if pair not in enrolled and not services.enrollments.repository.is_enrolled(*pair):
                messages.append(f"  [scores -> {idx}] 学生【{pair[0]}】未选课程【{pair[1]}】")

        return messages

    def import_data(self, data):
        """
        导入已通过 schema 校验的名册数据

        引用检查不通过时抛出 ValueError，不写入任何数据。

        Returns:
            dict: 统计信息
        """
        errors = self.check_references(data)
        if errors:
            error_msg = '\n'.join(errors)
            raise ValueError(f"名册引用检查失败：\n{error_msg}")

        stats = {
            'teachers': 0,
            'students': 0,
            'courses': 0,
            'enrollments': 0,
            'scores': 0,
            'skipped': 0,
        }

        print(f"\n{'='*60}")
        print("导入名册")
        print(f"{'='*60}")

        for item in data.get('teachers', []):
            if self.services.teachers.add_teacher(item['id'], item['name'], item['department']):
                stats['teachers'] += 1
            else:
                stats['skipped'] += 1

        for item in data.get('students', []):
            if self.services.students.add_student(item['id'], item['name'], item['major']):
                stats['students'] += 1
            else:
                stats['skipped'] += 1

        for item in data.get('courses', []):
            created = self.services.courses.add_course(
                item['id'], item['name'], item['credit'], item['teacher_id']
            )
            if created:
                stats['courses'] += 1
            else:
                stats['skipped'] += 1

        for item in data.get('enrollments', []):
            try:
                self.services.enrollments.enroll(item['student_id'], item['course_id'])
                stats['enrollments'] += 1
            except AlreadyEnrolledError:
                print(f"⚠️ {item['student_id']} 已选 {item['course_id']}，跳过")
                stats['skipped'] += 1

        for item in data.get('scores', []):
            self.services.scores.set_score(item['student_id'], item['course_id'], item['score'])
            stats['scores'] += 1

        print(f"\n{'='*60}")
        print("✓ 导入完成！")
        print(f"{'='*60}")
        print(f"  教师: {stats['teachers']}")
        print(f"  学生: {stats['students']}")
        print(f"  课程: {stats['courses']}")
        print(f"  选课: {stats['enrollments']}")
        print(f"  成绩: {stats['scores']}")
        print(f"  跳过: {stats['skipped']}")
        print(f"{'='*60}\n")
        return stats
