"""工具模块"""
from .formatting import parse_number, format_number, is_finite

__all__ = ['parse_number', 'format_number', 'is_finite']
