import pytest

from conftest import make_input
from errors import InvalidValueError
from utils import (
    require_text, require_range, require_int_range, is_in_range,
    read_int, read_string, read_score,
    display_width, format_row, format_table
)


def test_require_text():
    assert require_text("  S1 ", "学号") == "S1"
    with pytest.raises(InvalidValueError):
        require_text("   ", "学号")
    with pytest.raises(InvalidValueError):
        require_text(None, "学号")


def test_require_range():
    assert require_range(0, 0, 100, "成绩") == 0
    assert require_range(100.0, 0, 100, "成绩") == 100.0
    with pytest.raises(InvalidValueError):
        require_range(100.1, 0, 100, "成绩")
    with pytest.raises(InvalidValueError):
        require_range("90", 0, 100, "成绩")
    with pytest.raises(InvalidValueError):
        require_range(True, 0, 100, "成绩")
    assert not is_in_range(-0.5, 0, 100)


def test_require_int_range():
    assert require_int_range(10, 1, 10, "学分") == 10
    with pytest.raises(InvalidValueError):
        require_int_range(4.0, 1, 10, "学分")
    with pytest.raises(InvalidValueError):
        require_int_range(0, 1, 10, "学分")


def test_read_int_retries(capsys):
    assert read_int(1, 3, make_input(["", "0", "two", " 2 "])) == 2
    assert capsys.readouterr().out.count("输入无效，请输入1-3之间的整数") == 3


def test_read_string_rejects_empty(capsys):
    assert read_string("名字：", make_input(["", "  ", "张三"])) == "张三"
    assert capsys.readouterr().out.count("输入不能为空") == 2


def test_read_score():
    assert read_score(make_input(["101", "-3", "nan", "abc", "59.5"])) == 59.5


def test_read_raises_eof():
    with pytest.raises(EOFError):
        read_int(0, 1, make_input([]))


def test_display_width_counts_cjk_double():
    assert display_width("abc") == 3
    assert display_width("学生ID") == 6


def test_format_table_alignment():
    table = format_table(["学生ID", "姓名"], [("S1", "张三"), ("S22", "Li")], width=10)
    lines = table.split("\n")
    assert lines[0] == "学生ID    姓名"
    assert lines[1] == "-" * 20
    assert lines[2] == "S1        张三"
    assert lines[3] == "S22       Li"
    assert format_row([1, 2], width=3) == "1  2"
