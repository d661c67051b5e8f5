"""会话模块 - 按键分发和批量回放"""
from .calculator_session import CalculatorSession
from .replay import trace_keys, replay_sequences, load_key_sequences, replay_file

__all__ = ['CalculatorSession', 'trace_keys', 'replay_sequences', 'load_key_sequences', 'replay_file']
