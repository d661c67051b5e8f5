"""core/operators.py"""
from enum import Enum
import numpy as np
import logging

from config.config import ENGINE_CONFIG

logger = logging.getLogger(__name__)

# 该优先级的操作符总是立即作用于当前寄存器，因此最多只有一个操作数
IMMEDIATE = ENGINE_CONFIG["immediate_precedence"]


class OperatorKind(Enum):
    BINARY = "binary"  # 延迟到栈上求值
    IMMEDIATE = "immediate"  # 立即作用于寄存器
    NEGATE = "negate"  # 正负号切换，立即操作符的特例
    EVALUATE = "evaluate"  # 等号，清算整个栈


class Operators:
    """所有组合函数的静态方法集合

    按 IEEE-754 计算：除零得到 inf，负数开方得到 nan，不抛出异常。
    """

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.add(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.subtract(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.multiply(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def div(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def reciprocal(operand):
        """1/x"""
        with np.errstate(all='ignore'):
            return float(np.reciprocal(np.float64(operand)))

    @staticmethod
    def square(operand):
        """x^2"""
        with np.errstate(all='ignore'):
            return float(np.square(np.float64(operand)))

    @staticmethod
    def sqrt(operand):
        with np.errstate(all='ignore'):
            return float(np.sqrt(np.float64(operand)))

    @staticmethod
    def negate(operand):
        return float(np.negative(np.float64(operand)))

    @staticmethod
    def identity(operand):
        return float(operand)


class CalcOperator:
    """一个操作符（不可变）"""

    __slots__ = ('name', 'kind', 'arity', 'precedence', 'symbol', 'html', 'action')

    def __init__(self, name, kind, arity, precedence, symbol, action, html=None):
        values = {
            'name': name,
            'kind': kind,
            'arity': arity,
            'precedence': precedence,
            'symbol': symbol,
            'html': html if html is not None else symbol,
            'action': action,
        }
        for attr, value in values.items():
            object.__setattr__(self, attr, value)

    def __setattr__(self, key, value):
        raise AttributeError(f"CalcOperator '{self.name}' is immutable")

    @property
    def is_immediate(self):
        """是否走立即求值分支（等号除外）"""
        if self.kind == OperatorKind.EVALUATE:
            return False
        return self.precedence == IMMEDIATE or self.arity == 1

    def apply(self, *operands):
        if len(operands) != self.arity:
            raise TypeError(f"Operator '{self.name}' expects {self.arity} operand(s), got {len(operands)}")
        return self.action(*operands)

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return f"CalcOperator({self.name!r}, {self.kind.name}, precedence={self.precedence})"


_PRECEDENCE = ENGINE_CONFIG["binary_precedences"]

# 操作符定义字典
OPERATOR_DEFINITIONS = {
    # 二元操作符
    'add': CalcOperator('add', OperatorKind.BINARY, 2, _PRECEDENCE['add'], '+', Operators.add),
    'sub': CalcOperator('sub', OperatorKind.BINARY, 2, _PRECEDENCE['sub'], '-', Operators.sub),
    'mul': CalcOperator('mul', OperatorKind.BINARY, 2, _PRECEDENCE['mul'], '*', Operators.mul),
    'div': CalcOperator('div', OperatorKind.BINARY, 2, _PRECEDENCE['div'], '÷', Operators.div,
                        html='&#xF7;'),

    # 一元（立即）操作符
    'rep': CalcOperator('rep', OperatorKind.IMMEDIATE, 1, IMMEDIATE, '1/x', Operators.reciprocal),
    'sqr': CalcOperator('sqr', OperatorKind.IMMEDIATE, 1, IMMEDIATE, 'x²', Operators.square,
                        html='x<sup>2</sup>'),
    'sqt': CalcOperator('sqt', OperatorKind.IMMEDIATE, 1, IMMEDIATE, '√', Operators.sqrt,
                        html='&#x221A;'),
    'neg': CalcOperator('neg', OperatorKind.NEGATE, 1, IMMEDIATE, '+/-', Operators.negate),

    # 等号
    'equ': CalcOperator('equ', OperatorKind.EVALUATE, 1, IMMEDIATE, '=', Operators.identity),
}


def get_operator(name):
    """按名称查找操作符"""
    try:
        return OPERATOR_DEFINITIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operator '{name}'. Known: {', '.join(OPERATOR_DEFINITIONS)}") from None
