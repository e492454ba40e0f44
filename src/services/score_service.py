"""
成绩业务逻辑服务
"""
from models.score import SCORE_MIN, SCORE_MAX
from utils import require_range


class ScoreService:
    """成绩业务逻辑类"""

    def __init__(self, repository, student_repository, course_repository):
        """
        Args:
            repository: ScoreRepository 实例
            student_repository: StudentRepository 实例
            course_repository: CourseRepository 实例
        """
        self.repository = repository
        self.student_repository = student_repository
        self.course_repository = course_repository

    def set_score(self, student_id, course_id, score):
        """
        录入或更新成绩

        Returns:
            bool: True 表示新录入，False 表示更新

        Raises:
            StudentNotFoundError / CourseNotFoundError: 学生或课程不存在
            NotEnrolledError: 学生未选该课程
            InvalidValueError: 成绩不在 0-100 之间
        """
        score = require_range(score, SCORE_MIN, SCORE_MAX, "成绩")
        self.student_repository.get_by_id(student_id)
        self.course_repository.get_by_id(course_id)
        created = self.repository.set_score(student_id, course_id, float(score))
        action = "录入" if created else "更新"
        print(f"✓ 成绩{action}成功！（{student_id} / {course_id}: {score:.1f}）")
        return created

    def get_scores(self, student_id):
        return self.repository.get_scores_by_student(student_id)

    def get_student_report(self, student_id):
        """
        查询学生全部成绩及平均分

        Returns:
            dict: {
                'student': Student 对象,
                'rows': [(Score, Course), ...] 按课程编号升序,
                'average': 平均分
            }

        Raises:
            StudentNotFoundError: 学生不存在
            NoScoresError: 没有成绩记录
        """
        student = self.student_repository.get_by_id(student_id)
        scores = self.repository.get_scores_by_student(student_id)

        rows = []
        for score in scores:
            course = self.course_repository.get_by_id(score.course_id)
            rows.append((score, course))

        average = sum(s.score for s in scores) / len(scores)
        return {
            'student': student,
            'rows': rows,
            'average': average,
        }
