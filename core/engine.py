"""计算引擎 - 根据操作符决定立即求值、压栈或清算栈"""
import logging

from config.config import DISPLAY_CONFIG
from core.operators import OperatorKind
from core.register import Register
from core.stack import CalculatorStack

logger = logging.getLogger(__name__)


class DisplaySnapshot:
    """交给显示适配器的只读快照"""

    __slots__ = ('text', 'value', 'entries')

    def __init__(self, text, value, entries):
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'entries', tuple(entries))

    def __setattr__(self, key, value):
        raise AttributeError("DisplaySnapshot is immutable")

    @property
    def pending(self):
        """栈的文本形式，例如 '2 + 3 *'"""
        return DISPLAY_CONFIG["stack_separator"].join(entry.text for entry in self.entries)

    def __repr__(self):
        return f"DisplaySnapshot(text={self.text!r}, pending={self.pending!r})"


class CalculatorEngine:
    """
    "真正干活的东西"：寄存器和求值栈只由引擎修改。

    每次 operate()/clear() 以及寄存器编辑之后，都会把快照推送给所有显示适配器。
    """

    def __init__(self, displays=None):
        self._register = Register()
        self._stack = CalculatorStack()
        self._displays = list(displays) if displays else []

    @property
    def register(self):
        return self._register

    @property
    def stack(self):
        return self._stack

    def snapshot(self):
        return DisplaySnapshot(self._register.text, self._register.value, self._stack.snapshot())

    def _render(self):
        snapshot = self.snapshot()
        for display in self._displays:
            display.render(snapshot)

    # ================== 寄存器编辑 ==================

    def push_digit(self, digit):
        self._register.push(digit)
        self._render()

    def clear_entry(self):
        """只清除当前输入的数"""
        self._register.clear()
        self._render()

    def backspace(self):
        self._register.pop_last()
        self._render()

    def clear(self):
        """恢复到初始状态"""
        self._register.clear()
        self._stack.clear()
        for display in self._displays:
            display.clear()
        self._render()

    # ================== 操作符 ==================

    def operate(self, operator):
        logger.debug(f"operate {operator.name}: register={self._register!r}, stack={self._stack!r}")

        if operator.kind == OperatorKind.EVALUATE:
            self._evaluate()
        elif operator.is_immediate:
            self._apply_immediate(operator)
        else:
            self._defer_binary(operator)
            # 操作符之后重新开始输入
            self._register.restart()

        logger.debug(f"  -> register={self._register!r}, stack={self._stack!r}")
        self._render()

    def _evaluate(self):
        """等号：把整个栈从右向左折叠"""
        if not self._stack:
            return

        value = self._register.value
        if not self._register.changed():
            # 上一个操作符后没有输入新数：丢弃悬空的操作符，其左操作数成为当前值
            self._stack.pop_operator()
            value = self._stack.pop_operand()

        while self._stack:
            operator = self._stack.pop_operator()
            value = operator.apply(self._stack.pop_operand(), value)

        self._register.set_value(value)
        self._register.restart()

    def _apply_immediate(self, operator):
        if operator.kind == OperatorKind.NEGATE and not self._register.changed():
            return

        self._register.set_value(operator.apply(self._register.value))
        if self._stack and not self._register.changed():
            # 寄存器内容来自上一次计算：撤销被取代的挂起操作
            self._stack.pop_operator()
            self._stack.pop_operand()

    def _defer_binary(self, operator):
        if not self._stack:
            self._stack.push(self._register.value, operator)
            return

        if not self._register.changed():
            # 两个操作符之间没有输入数字：后一个替换前一个
            self._stack.pop_operator()
            self._stack.push(operator)
            return

        prev = self._stack.pop_operator()
        if operator.precedence > prev.precedence:
            # 当前操作符优先，栈上的操作符继续等待
            self._stack.push(prev, self._register.value, operator)
            return

        op2 = self._register.value
        self._stack.push(prev)
        while self._stack and operator.precedence <= self._stack.peek().precedence:
            prev = self._stack.pop_operator()
            op2 = prev.apply(self._stack.pop_operand(), op2)
        self._register.set_value(op2)
        self._stack.push(op2, operator)

    def __repr__(self):
        return f"CalculatorEngine({self._register!r}, {self._stack!r})"
