"""
工具函数模块
"""
from .validators import (
    require_text,
    require_range,
    require_int_range,
    is_in_range
)
from .input_utils import (
    read_int,
    read_string,
    read_credit,
    read_score
)
from .table_utils import (
    TABLE_WIDTH,
    display_width,
    format_row,
    format_table
)

__all__ = [
    'require_text',
    'require_range',
    'require_int_range',
    'is_in_range',
    'read_int',
    'read_string',
    'read_credit',
    'read_score',
    'TABLE_WIDTH',
    'display_width',
    'format_row',
    'format_table'
]
