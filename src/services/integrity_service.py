"""
数据完整性检查服务
找出违反数据模型约束的记录（外键悬空、成绩无对应选课、取值越界）

正常通过本系统写入的数据不会出现这些问题；用于检查手工改库或
外键检查被关闭时遗留的数据。
"""
from sqlalchemy import and_, or_
from models import Student, Teacher, Course, Enrollment, Score
from models.course import CREDIT_MIN, CREDIT_MAX
from models.score import SCORE_MIN, SCORE_MAX


class DataIntegrityChecker:
    """数据完整性检查器"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.session = session
        self.issues = {
            'orphan_enrollments': [],
            'scores_without_enrollment': [],
            'courses_missing_teacher': [],
            'invalid_credits': [],
            'invalid_scores': [],
        }

    def run(self):
        """
        执行全部检查

        Returns:
            dict: 问题类别 -> 问题记录列表
        """
        self.issues['orphan_enrollments'] = self._find_orphan_enrollments()
        self.issues['scores_without_enrollment'] = self._find_scores_without_enrollment()
        self.issues['courses_missing_teacher'] = self._find_courses_missing_teacher()
        self.issues['invalid_credits'] = self._find_invalid_credits()
        self.issues['invalid_scores'] = self._find_invalid_scores()
        self.session.rollback()
        return self.issues

    def has_issues(self):
        return any(self.issues.values())

    def _find_orphan_enrollments(self):
        """选课记录指向不存在的学生或课程"""
        rows = self.session.query(Enrollment.student_id, Enrollment.course_id).outerjoin(
            Student, Student.id == Enrollment.student_id
        ).outerjoin(
            Course, Course.id == Enrollment.course_id
        ).filter(
            or_(Student.id.is_(None), Course.id.is_(None))
        ).order_by(Enrollment.student_id, Enrollment.course_id).all()
        return [(student_id, course_id) for student_id, course_id in rows]

    def _find_scores_without_enrollment(self):
        rows = self.session.query(Score.student_id, Score.course_id).outerjoin(
            Enrollment,
            and_(
                Enrollment.student_id == Score.student_id,
                Enrollment.course_id == Score.course_id
            )
        ).filter(
            Enrollment.student_id.is_(None)
        ).order_by(Score.student_id, Score.course_id).all()
        return [(student_id, course_id) for student_id, course_id in rows]

    def _find_courses_missing_teacher(self):
        rows = self.session.query(Course.id, Course.teacher_id).outerjoin(
            Teacher, Teacher.id == Course.teacher_id
        ).filter(
            Teacher.id.is_(None)
        ).order_by(Course.id).all()
        return [(course_id, teacher_id) for course_id, teacher_id in rows]

    def _find_invalid_credits(self):
        rows = self.session.query(Course.id, Course.credit).filter(
            or_(Course.credit < CREDIT_MIN, Course.credit > CREDIT_MAX)
        ).order_by(Course.id).all()
        return [(course_id, credit) for course_id, credit in rows]

    def _find_invalid_scores(self):
        rows = self.session.query(Score.student_id, Score.course_id, Score.score).filter(
            or_(Score.score < SCORE_MIN, Score.score > SCORE_MAX)
        ).order_by(Score.student_id, Score.course_id).all()
        return [(student_id, course_id, score) for student_id, course_id, score in rows]
