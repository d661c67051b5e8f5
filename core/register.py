"""core/register.py"""
import logging

from config.config import DISPLAY_CONFIG
from utils.formatting import parse_number, format_number

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')
POINT = DISPLAY_CONFIG["decimal_point"]


class Register:
    """当前正在输入的操作数（文本 + 数值 + 是否刚刚重新开始）"""

    def __init__(self):
        self.text = DISPLAY_CONFIG["initial_text"]
        self.value = 0.0
        self._fresh = True

    @property
    def fresh(self):
        return self._fresh

    def clear(self):
        """恢复初始状态"""
        self.text = DISPLAY_CONFIG["initial_text"]
        self.value = 0.0
        self._fresh = True

    def restart(self):
        """下一位数字开始一个新数，文本和数值保持不变"""
        self._fresh = True

    def changed(self):
        """自上次 restart/clear 以来是否输入过数字"""
        return not self._fresh

    def has_point(self):
        return POINT in self.text

    def push(self, digit):
        """
        追加一位数字或小数点

        Args:
            digit: '0'-'9' 或小数点
        """
        if digit not in DIGITS and digit != POINT:
            raise ValueError(f"Register accepts digits and '{POINT}' only, got {digit!r}")

        if self._fresh:
            self.text = digit
            self._fresh = False
        else:
            if digit == POINT and self.has_point():
                # 一个数里只允许一个小数点
                return
            self.text += digit
        self.value = parse_number(self.text)

    def pop_last(self):
        """删除最后输入的一位"""
        if self._fresh:
            return
        if len(self.text) > 1:
            self.text = self.text[:-1]
            self.value = parse_number(self.text)
        else:
            self.clear()

    def set_value(self, value):
        """写入计算结果；fresh 标志由调用方决定"""
        self.value = float(value)
        self.text = format_number(self.value)

    def __repr__(self):
        return f"Register(text={self.text!r}, value={self.value}, fresh={self._fresh})"
