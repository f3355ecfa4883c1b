"""配置文件"""

# 容量上限（与原始定长缓冲区一致）
LIMITS_CONFIG = {
    "max_expr_len": 4096,   # 单行输入最大长度
    "max_tokens": 4096,     # 后缀序列/操作符栈/数值栈的最大元素数
    "max_token_len": 64,    # 数字token最多 max_token_len - 1 位
}

# 求值器参数
EVALUATOR_CONFIG = {
    "overflow": "wrap",     # "wrap": 64位补码回绕; "checked": 溢出报错
}

# 交互外壳参数
SHELL_CONFIG = {
    "prompt": "> ",
    "unary_symbol": "~",    # 后缀输出中一元负号的显示符号
    "banner": (
        "Expression Calculator (integers)\n"
        "Supports: + - * / % ^, parentheses, unary minus\n"
        "Examples:\n"
        "  -3 + 4*(2-1) ^ 3\n"
        "  2*-5 + (7 - -(3))\n"
        "Enter expression (or empty line to quit):\n"
    ),
    "farewell": "Goodbye!",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

OVERFLOW_MODES = ("wrap", "checked")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert LIMITS_CONFIG["max_expr_len"] > 0, "max_expr_len必须为正"
    assert LIMITS_CONFIG["max_tokens"] > 0, "max_tokens必须为正"
    assert LIMITS_CONFIG["max_token_len"] >= 2, "数字token至少允许1位"
    assert EVALUATOR_CONFIG["overflow"] in OVERFLOW_MODES, \
        f"overflow必须是 {OVERFLOW_MODES} 之一"
    assert len(SHELL_CONFIG["unary_symbol"]) > 0, "unary_symbol不能为空"
    return True
