"""计算器会话 - 持有引擎和按键表，把按键分发到对应的处理函数"""
import logging

from core import (
    CalculatorEngine, KeyType, ActionKey, KEY_DEFINITIONS,
    get_operator, tokenize_keys
)

logger = logging.getLogger(__name__)


class CalculatorSession:
    """一次计算器会话"""

    def __init__(self, displays=None, key_definitions=None):
        self.engine = CalculatorEngine(displays)
        self.key_definitions = KEY_DEFINITIONS if key_definitions is None else key_definitions
        self.key_count = 0

    @property
    def display_text(self):
        return self.engine.register.text

    @property
    def value(self):
        return self.engine.register.value

    @property
    def pending(self):
        return self.engine.snapshot().pending

    def reset(self):
        """开始新的会话"""
        self.engine.clear()
        self.key_count = 0
        return self.engine.snapshot()

    def on_digit(self, digit):
        self.engine.push_digit(digit)

    def on_operator(self, name):
        self.engine.operate(get_operator(name))

    def on_action(self, action):
        if action == ActionKey.C:
            self.engine.clear()
        elif action == ActionKey.CE:
            self.engine.clear_entry()
        elif action == ActionKey.BSP:
            self.engine.backspace()
        else:
            logger.warning(f"Unknown action key: {action!r}")

    def handle_key(self, key):
        """
        处理一个逻辑按键

        Returns:
            bool: 按键是否被绑定并处理
        """
        binding = self.key_definitions.get(key)
        if binding is None:
            logger.debug(f"Ignoring unbound key {key!r}")
            return False

        self.key_count += 1
        if binding.type == KeyType.DIGIT:
            self.on_digit(binding.argument)
        elif binding.type == KeyType.OPERATOR:
            self.on_operator(binding.argument)
        else:
            self.on_action(binding.argument)
        return True

    def press(self, keys):
        """
        依次处理多个按键

        Args:
            keys: 按键字符串（见 tokenize_keys）或按键名的可迭代对象
        Returns:
            处理后的显示文本
        """
        if isinstance(keys, str):
            keys = tokenize_keys(keys)
        for key in keys:
            self.handle_key(key)
        return self.display_text

    def __repr__(self):
        return f"CalculatorSession(display={self.display_text!r}, pending={self.pending!r})"
