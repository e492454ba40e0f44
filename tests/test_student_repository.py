import pytest
from sqlalchemy import event

from errors import StudentNotFoundError
from models import Student, Enrollment, Score
from repositories import StudentRepository


def test_add_is_idempotent(session):
    repo = StudentRepository(session)
    assert repo.add(Student(id="S1", name="Zhang", major="CS")) is True
    assert repo.add(Student(id="S1", name="Other", major="Math")) is False

    rows = session.query(Student).all()
    assert len(rows) == 1
    assert rows[0].name == "Zhang"


def test_get_by_id_missing_raises(session):
    repo = StudentRepository(session)
    with pytest.raises(StudentNotFoundError) as exc:
        repo.get_by_id("S404")
    assert exc.value.entity_id == "S404"


def test_get_all_ordered_by_id(session):
    repo = StudentRepository(session)
    assert repo.get_all() == []
    for sid in ["S3", "S1", "S2"]:
        repo.add(Student(id=sid, name=sid, major="CS"))
    assert [s.id for s in repo.get_all()] == ["S1", "S2", "S3"]
    assert repo.exists("S2")
    assert not repo.exists("S9")


def test_delete_cascades_scores_and_enrollments(seeded, session):
    seeded.enrollments.enroll("S1", "C1")
    seeded.enrollments.enroll("S1", "C2")
    seeded.enrollments.enroll("S2", "C1")
    seeded.scores.set_score("S1", "C1", 90)
    seeded.scores.set_score("S2", "C1", 70)

    seeded.students.delete_student("S1")

    assert session.query(Enrollment).filter(Enrollment.student_id == "S1").count() == 0
    assert session.query(Score).filter(Score.student_id == "S1").count() == 0
    assert session.query(Student).filter(Student.id == "S1").count() == 0
    # 其他学生的数据不受影响
    assert session.query(Enrollment).filter(Enrollment.student_id == "S2").count() == 1
    assert session.query(Score).filter(Score.student_id == "S2").count() == 1


def test_delete_missing_raises(session):
    with pytest.raises(StudentNotFoundError):
        StudentRepository(session).delete("S404")


def test_readd_after_delete(seeded):
    seeded.students.delete_student("S1")
    assert seeded.students.add_student("S1", "Zhang", "CS") is True


def test_delete_failure_rolls_back_whole_cascade(db, seeded):
    seeded.enrollments.enroll("S1", "C1")
    seeded.scores.set_score("S1", "C1", 90)

    def fail_on_student_delete(conn, cursor, statement, parameters, context, executemany):
        if statement.startswith("DELETE FROM students"):
            raise RuntimeError("disk full")

    event.listen(db.engine, "before_cursor_execute", fail_on_student_delete)
    try:
        with pytest.raises(RuntimeError):
            seeded.students.delete_student("S1")
    finally:
        event.remove(db.engine, "before_cursor_execute", fail_on_student_delete)

    # 后续提交不能把已执行的部分删除带进去
    seeded.students.add_student("S3", "Sun", "CS")

    fresh = db.get_session()
    try:
        assert fresh.query(Student).filter(Student.id == "S1").count() == 1
        assert fresh.query(Enrollment).filter(Enrollment.student_id == "S1").count() == 1
        assert fresh.query(Score).filter(Score.student_id == "S1").count() == 1
        assert fresh.query(Student).filter(Student.id == "S3").count() == 1
    finally:
        fresh.close()
