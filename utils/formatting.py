"""utils/formatting.py"""
import re
import numpy as np

# 与浏览器 parseFloat 相同：只解析最长的数字前缀
_NUMBER_PREFIX = re.compile(r'^\s*([+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))')

MAX_PLAIN_INTEGER = 1e21  # 超过此值时使用指数形式
MIN_PLAIN_FRACTION = 1e-6  # 低于此值时使用指数形式
MAX_EXACT_INTEGER = 2 ** 53  # 超过此值的整数只显示最短的往返精度数字


def parse_number(text):
    """
    将寄存器文本解析为浮点数

    无法解析的文本（如 "."、"-"、"NaN"）返回 nan，而不是抛出异常。
    """
    match = _NUMBER_PREFIX.match(text or "")
    if match is None:
        return float('nan')
    literal = match.group(1)
    if literal.endswith('Infinity'):
        return float('-inf') if literal.startswith('-') else float('inf')
    return float(literal)


def format_number(value):
    """数值的规范文本形式：整数不带小数点，非有限值显示为 Infinity / NaN"""
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value.is_integer() and abs(value) < MAX_EXACT_INTEGER:
        # -0.0 也显示为 "0"
        return str(int(value))
    if MIN_PLAIN_FRACTION <= abs(value) < MAX_PLAIN_INTEGER:
        return np.format_float_positional(value, unique=True, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=1)


def is_finite(value):
    """检查结果是否为有限值"""
    return bool(np.isfinite(value))
