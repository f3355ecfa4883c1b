from config.config import LIMITS_CONFIG, EVALUATOR_CONFIG, OVERFLOW_MODES, validate_config


def test_default_config_is_valid():
    assert validate_config()


def test_default_limits():
    assert LIMITS_CONFIG == {"max_expr_len": 4096, "max_tokens": 4096, "max_token_len": 64}
    assert EVALUATOR_CONFIG["overflow"] in OVERFLOW_MODES
