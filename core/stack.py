"""core/stack.py - 操作数/操作符交替排列的求值栈"""
import numpy as np

from utils.formatting import format_number


class Operand:
    """栈中的操作数"""

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = float(value)

    @property
    def text(self):
        return format_number(self.value)

    @property
    def html(self):
        return self.text

    def __eq__(self, other):
        if not isinstance(other, Operand):
            return NotImplemented
        # nan 与自身相等，便于比较快照
        return self.value == other.value or (np.isnan(self.value) and np.isnan(other.value))

    def __hash__(self):
        return hash(('operand', self.text))

    def __repr__(self):
        return f"Operand({self.value})"


class OperatorEntry:
    """栈中的操作符"""

    __slots__ = ('operator',)

    def __init__(self, operator):
        self.operator = operator

    @property
    def precedence(self):
        return self.operator.precedence

    @property
    def text(self):
        return self.operator.symbol

    @property
    def html(self):
        return self.operator.html

    def __eq__(self, other):
        if not isinstance(other, OperatorEntry):
            return NotImplemented
        return self.operator is other.operator

    def __hash__(self):
        return hash(('operator', self.operator.name))

    def __repr__(self):
        return f"OperatorEntry({self.operator.name!r})"


class CalculatorStack:
    """
    求值栈：自底向上为 [操作数, 操作符, 操作数, 操作符, ...]

    只能从栈顶压入/弹出。破坏交替顺序的压入会抛出 TypeError。
    """

    def __init__(self):
        self._items = []

    def _expected_type(self):
        return Operand if len(self._items) % 2 == 0 else OperatorEntry

    def push(self, *items):
        """依次压入多个条目；数值自动包装为 Operand，操作符包装为 OperatorEntry"""
        for item in items:
            if not isinstance(item, (Operand, OperatorEntry)):
                item = Operand(item) if isinstance(item, (int, float)) else OperatorEntry(item)
            expected = self._expected_type()
            if not isinstance(item, expected):
                raise TypeError(f"Expected {expected.__name__} at stack position {len(self._items)}, "
                                f"got {item!r}")
            self._items.append(item)

    def pop(self):
        return self._items.pop()

    def pop_operand(self):
        item = self._items.pop()
        if not isinstance(item, Operand):
            raise TypeError(f"Expected operand on top of stack, got {item!r}")
        return item.value

    def pop_operator(self):
        item = self._items.pop()
        if not isinstance(item, OperatorEntry):
            raise TypeError(f"Expected operator on top of stack, got {item!r}")
        return item.operator

    def peek(self):
        if self._items:
            return self._items[-1]
        return None

    def clear(self):
        self._items = []

    def snapshot(self):
        """只读快照"""
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    def __repr__(self):
        return f"CalculatorStack({' '.join(item.text for item in self._items)})"
