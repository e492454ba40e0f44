"""
Score 数据访问层
"""
from errors import NotEnrolledError, NoScoresError
from models import Enrollment, Score
from .base_repository import BaseRepository


class ScoreRepository(BaseRepository):
    """Score 数据访问类"""

    def set_score(self, student_id, course_id, score):
        """
        录入或更新成绩（以 student_id + course_id 为键）

        Args:
            student_id: 学号
            course_id: 课程编号
            score: 分数（0-100）

        Returns:
            bool: True 表示新录入，False 表示覆盖了已有成绩

        Raises:
            NotEnrolledError: 学生未选该课程，不写入任何成绩
        """
        with self.transaction("成绩录入"):
            enrolled = self.session.query(Enrollment).filter(
                Enrollment.student_id == student_id,
                Enrollment.course_id == course_id
            ).count() > 0
            if not enrolled:
                raise NotEnrolledError(student_id, course_id)

            existing = self.session.query(Score).filter(
                Score.student_id == student_id,
                Score.course_id == course_id
            ).first()
            if existing is not None:
                existing.score = score
                return False

            self.session.add(Score(student_id=student_id, course_id=course_id, score=score))
            return True

    def get_scores_by_student(self, student_id):
        """
        获取学生的所有成绩，按课程编号升序

        Raises:
            NoScoresError: 该学生没有成绩记录
        """
        with self.transaction("查询成绩"):
            scores = self.session.query(Score).filter(
                Score.student_id == student_id
            ).order_by(Score.course_id).all()
        if not scores:
            raise NoScoresError(student_id)
        return scores
