# lllcheck Rules Module

from .base_rule import BaseRule
from .line_length_rule import LineLengthRule, MAX_SCAN_TOKEN_SIZE, iter_lines


def get_all_rules():
    """获取所有内置规则类"""
    return [
        LineLengthRule,
    ]


__all__ = [
    'BaseRule',
    'LineLengthRule',
    'MAX_SCAN_TOKEN_SIZE',
    'iter_lines',
    'get_all_rules',
]
