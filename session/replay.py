"""按键脚本的批量回放"""
import os
import logging
import pandas as pd

from config.config import REPLAY_CONFIG
from core import tokenize_keys
from utils.formatting import is_finite
from .calculator_session import CalculatorSession

logger = logging.getLogger(__name__)


def trace_keys(keys):
    """
    逐键回放一个按键序列

    Parameters:
    - keys: 按键字符串或按键名列表

    Returns:
    - DataFrame，每个被处理的按键一行：step, key, display, value, pending, fresh
    """
    if isinstance(keys, str):
        keys = tokenize_keys(keys)

    session = CalculatorSession()
    rows = []
    for key in keys:
        if not session.handle_key(key):
            continue
        rows.append({
            'step': session.key_count,
            'key': key,
            'display': session.display_text,
            'value': session.value,
            'pending': session.pending,
            'fresh': session.engine.register.fresh,
        })
    return pd.DataFrame(rows, columns=['step', 'key', 'display', 'value', 'pending', 'fresh'])


def replay_sequences(sequences):
    """
    每个按键序列在新的会话中独立回放

    Returns:
    - DataFrame，每个序列一行：keys, display, value, pending, finite
    """
    rows = []
    for keys in sequences:
        session = CalculatorSession()
        session.press(keys)
        rows.append({
            'keys': keys,
            'display': session.display_text,
            'value': session.value,
            'pending': session.pending,
            'finite': is_finite(session.value),
        })
    result = pd.DataFrame(rows, columns=['keys', 'display', 'value', 'pending', 'finite'])
    logger.info(f"Replayed {len(result)} sequences, {(~result['finite'].astype(bool)).sum()} non-finite results")
    return result


def load_key_sequences(file_path, keys_column=None):
    """
    读取按键脚本

    CSV 文件需包含按键列（默认 'keys'）；其他文件按行读取，忽略空行和注释行。
    """
    keys_column = keys_column or REPLAY_CONFIG["keys_column"]
    logger.info(f"Loading key sequences from {file_path}")

    if file_path.endswith('.csv'):
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if keys_column not in frame.columns:
            raise ValueError(f"Keys column '{keys_column}' not found in {file_path}.")
        sequences = [s for s in frame[keys_column].tolist() if s.strip()]
    else:
        comment = REPLAY_CONFIG["comment_prefix"]
        with open(file_path, 'r', encoding='utf-8') as f:
            sequences = [line.strip() for line in f
                         if line.strip() and not line.strip().startswith(comment)]

    logger.info(f"Loaded {len(sequences)} sequences")
    return sequences


def replay_file(file_path, output_path=None):
    """回放按键脚本，并可选保存结果为 CSV"""
    if not os.path.exists(file_path):
        logger.error(f"Key script not found: {file_path}")
        raise FileNotFoundError(file_path)

    results = replay_sequences(load_key_sequences(file_path))
    if output_path:
        logger.info(f"Saving replay results to {output_path}")
        results.to_csv(output_path, index=False)
    return results
