import os

import pytest

from models import Course, Enrollment, Score, Student, Teacher
from services import RosterService

SAMPLE = os.path.join(os.path.dirname(__file__), '..', 'data', 'roster', 'sample.yml')


def test_sample_file_is_valid():
    assert RosterService.validate_yaml(SAMPLE) == []


def test_import_sample(services, session):
    stats = RosterService(services).import_from_yaml(SAMPLE)

    assert stats['teachers'] == 2
    assert stats['students'] == 2
    assert stats['courses'] == 2
    assert stats['enrollments'] == 3
    assert stats['scores'] == 2
    assert stats['skipped'] == 0
    assert session.query(Teacher).count() == 2
    assert session.query(Student).count() == 2
    assert session.query(Course).count() == 2
    assert session.query(Enrollment).count() == 3
    assert services.scores.get_student_report("S1")['average'] == pytest.approx(88.75)


def test_reimport_skips_existing_rows(services, session):
    service = RosterService(services)
    service.import_from_yaml(SAMPLE)
    stats = service.import_from_yaml(SAMPLE)

    assert stats['skipped'] == 9
    assert stats['scores'] == 2
    assert session.query(Enrollment).count() == 3
    assert session.query(Score).count() == 2


def test_schema_errors_are_reported():
    errors = RosterService.validate_data({
        'courses': [{'id': 'C1', 'name': 'X', 'credit': 11, 'teacher_id': 'T1'}],
        'scores': [{'student_id': 'S1', 'course_id': 'C1'}],
    })
    assert len(errors) == 2
    assert any('courses -> 0 -> credit' in e for e in errors)
    assert any('scores -> 0' in e for e in errors)


def test_invalid_file_writes_nothing(services, session, tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text(
        "teachers:\n"
        "  - id: T1\n"
        "    name: Wang\n"
        "    department: CS\n"
        "students:\n"
        "  - id: S1\n"
        "    name: Zhang\n",
        encoding='utf-8'
    )
    with pytest.raises(ValueError):
        RosterService(services).import_from_yaml(str(path))
    assert session.query(Teacher).count() == 0


def _write(tmp_path, text):
    path = tmp_path / "roster.yml"
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_unknown_teacher_writes_nothing(services, session, tmp_path):
    path = _write(tmp_path,
        "teachers:\n"
        "  - {id: T1, name: Wang, department: CS}\n"
        "students:\n"
        "  - {id: S1, name: Zhang, major: CS}\n"
        "courses:\n"
        "  - {id: C1, name: Algorithms, credit: 4, teacher_id: T99}\n"
    )
    with pytest.raises(ValueError) as exc:
        RosterService(services).import_from_yaml(path)

    assert "T99" in str(exc.value)
    assert session.query(Teacher).count() == 0
    assert session.query(Student).count() == 0
    assert session.query(Course).count() == 0


def test_score_without_enrollment_writes_nothing(services, session, tmp_path):
    path = _write(tmp_path,
        "teachers:\n"
        "  - {id: T1, name: Wang, department: CS}\n"
        "students:\n"
        "  - {id: S1, name: Zhang, major: CS}\n"
        "courses:\n"
        "  - {id: C1, name: Algorithms, credit: 4, teacher_id: T1}\n"
        "  - {id: C2, name: Compilers, credit: 3, teacher_id: T1}\n"
        "enrollments:\n"
        "  - {student_id: S1, course_id: C1}\n"
        "scores:\n"
        "  - {student_id: S1, course_id: C2, score: 80}\n"
    )
    with pytest.raises(ValueError) as exc:
        RosterService(services).import_from_yaml(path)

    assert "scores -> 0" in str(exc.value)
    assert session.query(Teacher).count() == 0
    assert session.query(Course).count() == 0
    assert session.query(Enrollment).count() == 0
    assert session.query(Score).count() == 0


def test_unknown_enrollment_targets_are_reported(seeded):
    errors = RosterService(seeded).check_references({
        'enrollments': [{'student_id': 'S9', 'course_id': 'C9'}],
    })
    assert len(errors) == 2
    assert any('S9' in e for e in errors)
    assert any('C9' in e for e in errors)


def test_references_to_existing_rows_are_accepted(seeded, session, tmp_path):
    path = _write(tmp_path,
        "enrollments:\n"
        "  - {student_id: S1, course_id: C1}\n"
        "scores:\n"
        "  - {student_id: S1, course_id: C1, score: 88}\n"
    )
    stats = RosterService(seeded).import_from_yaml(path)

    assert stats['enrollments'] == 1
    assert stats['scores'] == 1
    assert session.query(Score).one().score == 88


def test_blank_names_fail_schema(services, session, tmp_path):
    path = _write(tmp_path,
        "teachers:\n"
        "  - {id: T1, name: Wang, department: CS}\n"
        "students:\n"
        "  - {id: S1, name: '   ', major: CS}\n"
    )
    with pytest.raises(ValueError):
        RosterService(services).import_from_yaml(path)
    assert session.query(Teacher).count() == 0
