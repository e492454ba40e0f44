"""
定宽表格输出工具

中日韩字符在终端中占两列，按显示宽度而不是字符数补齐。
"""
import unicodedata

TABLE_WIDTH = 15  # 每列显示宽度


def display_width(text: str) -> int:
    """
    计算字符串在终端中的显示宽度

    Examples:
        >>> display_width("abc")
        3
        >>> display_width("学生")
        4
    """
    return sum(2 if unicodedata.east_asian_width(ch) in ('W', 'F') else 1 for ch in text)


def pad(value, width: int = TABLE_WIDTH) -> str:
    """左对齐并补空格到指定显示宽度（超长不截断）"""
    text = str(value)
    return text + " " * max(width - display_width(text), 0)


def format_row(values, width: int = TABLE_WIDTH) -> str:
    return "".join(pad(v, width) for v in values).rstrip()


def format_table(headers, rows, width: int = TABLE_WIDTH) -> str:
    """
    生成表头 + 分隔线 + 数据行的多行字符串

    Args:
        headers: 列名列表
        rows: 每行一个值序列
        width: 每列显示宽度

    Returns:
        str: 可直接 print 的表格文本
    """
    lines = [format_row(headers, width), "-" * (width * len(headers))]
    lines.extend(format_row(row, width) for row in rows)
    return "\n".join(lines)
