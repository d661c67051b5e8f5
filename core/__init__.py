"""核心模块 - 操作符表、寄存器、求值栈和计算引擎"""
from .operators import (
    OperatorKind, CalcOperator, Operators, OPERATOR_DEFINITIONS,
    IMMEDIATE, get_operator
)
from .register import Register
from .stack import CalculatorStack, Operand, OperatorEntry
from .engine import CalculatorEngine, DisplaySnapshot
from .key_system import KeyType, ActionKey, KeyBinding, KEY_DEFINITIONS, tokenize_keys

__all__ = [
    'OperatorKind', 'CalcOperator', 'Operators', 'OPERATOR_DEFINITIONS',
    'IMMEDIATE', 'get_operator',
    'Register', 'CalculatorStack', 'Operand', 'OperatorEntry',
    'CalculatorEngine', 'DisplaySnapshot',
    'KeyType', 'ActionKey', 'KeyBinding', 'KEY_DEFINITIONS', 'tokenize_keys'
]
