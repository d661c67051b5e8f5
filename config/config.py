"""配置文件"""

# 计算引擎参数
ENGINE_CONFIG = {
    "immediate_precedence": 4,  # 该优先级的操作符立即作用于寄存器
    "binary_precedences": {"add": 1, "sub": 1, "mul": 2, "div": 2},
    "max_stack_render": 32,  # 栈显示最多渲染的条目数
}

# 显示参数
DISPLAY_CONFIG = {
    "initial_text": "0",
    "decimal_point": ".",
    "stack_separator": " ",
    "show_stack": False,
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 批量回放配置
REPLAY_CONFIG = {
    "keys_column": "keys",
    "comment_prefix": "#",
    "default_output_path": "replay_results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precedences = ENGINE_CONFIG["binary_precedences"]
    assert ENGINE_CONFIG["immediate_precedence"] > max(precedences.values()), \
        "IMMEDIATE必须高于所有二元操作符的优先级"
    assert precedences["add"] == precedences["sub"] < precedences["mul"] == precedences["div"], \
        "只支持两级优先级"
    assert DISPLAY_CONFIG["initial_text"] == "0", "寄存器初始文本必须为0"
    assert len(DISPLAY_CONFIG["decimal_point"]) == 1, "小数点必须是单个字符"
    return True
