"""core/key_system.py"""
from enum import Enum
import logging

from config.config import DISPLAY_CONFIG

logger = logging.getLogger(__name__)


class KeyType(Enum):
    DIGIT = "digit"  # 数字和小数点
    OPERATOR = "operator"  # 操作符
    ACTION = "action"  # 清除/退格


class ActionKey(Enum):
    """由按键触发的动作"""
    C = 9  # 恢复到初始状态
    CE = 10  # 清除当前输入的数
    BSP = 11  # 删除最后一位


class KeyBinding:
    def __init__(self, key_type, argument):
        self.type = key_type
        self.argument = argument

    def __eq__(self, other):
        if not isinstance(other, KeyBinding):
            return NotImplemented
        return self.type == other.type and self.argument == other.argument

    def __hash__(self):
        return hash((self.type, self.argument))

    def __repr__(self):
        return f"KeyBinding({self.type.name}, {self.argument!r})"


_POINT = DISPLAY_CONFIG["decimal_point"]

# 按键定义字典：逻辑按键 -> {类型, 参数}
KEY_DEFINITIONS = {
    # 数字
    **{d: KeyBinding(KeyType.DIGIT, d) for d in '0123456789'},
    '.': KeyBinding(KeyType.DIGIT, _POINT),
    ',': KeyBinding(KeyType.DIGIT, _POINT),

    # 二元操作符
    '+': KeyBinding(KeyType.OPERATOR, 'add'),
    '-': KeyBinding(KeyType.OPERATOR, 'sub'),
    '*': KeyBinding(KeyType.OPERATOR, 'mul'),
    'x': KeyBinding(KeyType.OPERATOR, 'mul'),
    '/': KeyBinding(KeyType.OPERATOR, 'div'),
    '÷': KeyBinding(KeyType.OPERATOR, 'div'),

    # 等号
    '=': KeyBinding(KeyType.OPERATOR, 'equ'),
    'Enter': KeyBinding(KeyType.OPERATOR, 'equ'),

    # 立即操作符
    'r': KeyBinding(KeyType.OPERATOR, 'rep'),
    'rep': KeyBinding(KeyType.OPERATOR, 'rep'),
    'recip': KeyBinding(KeyType.OPERATOR, 'rep'),
    'q': KeyBinding(KeyType.OPERATOR, 'sqr'),
    'sqr': KeyBinding(KeyType.OPERATOR, 'sqr'),
    'square': KeyBinding(KeyType.OPERATOR, 'sqr'),
    's': KeyBinding(KeyType.OPERATOR, 'sqt'),
    'sqt': KeyBinding(KeyType.OPERATOR, 'sqt'),
    'sqrt': KeyBinding(KeyType.OPERATOR, 'sqt'),
    'n': KeyBinding(KeyType.OPERATOR, 'neg'),
    'neg': KeyBinding(KeyType.OPERATOR, 'neg'),

    # 动作
    'Backspace': KeyBinding(KeyType.ACTION, ActionKey.BSP),
    'BSP': KeyBinding(KeyType.ACTION, ActionKey.BSP),
    'Escape': KeyBinding(KeyType.ACTION, ActionKey.C),
    'C': KeyBinding(KeyType.ACTION, ActionKey.C),
    'Delete': KeyBinding(KeyType.ACTION, ActionKey.CE),
    'CE': KeyBinding(KeyType.ACTION, ActionKey.CE),
}


def tokenize_keys(text, strict=False):
    """
    把按键字符串拆分为逻辑按键序列

    以空白分隔的单词若本身是按键名（如 'sqrt'、'Enter'），整体作为一个按键；
    否则逐字符拆分，因此 "2+3*4=" 与 "2 + 3 * 4 =" 等价。
    注意 "9sqrt" 会被拆成 9 s q r t（三个立即操作符），此时记录一条警告。

    Args:
        text: 按键字符串
        strict: 为 True 时遇到未绑定的按键抛出 KeyError
    Returns:
        按键名列表
    """
    keys = []
    for word in text.split():
        if word in KEY_DEFINITIONS:
            keys.append(word)
            continue
        letters = [char for char in word if char.isalpha() and char in KEY_DEFINITIONS]
        if len(letters) > 1:
            logger.warning(f"Word {word!r} is not a key name; splitting it into keys {letters}")
        for char in word:
            if char in KEY_DEFINITIONS:
                keys.append(char)
            elif strict:
                raise KeyError(f"Unbound key {char!r} in {word!r}")
            else:
                logger.debug(f"Dropping unbound key {char!r}")
    return keys
