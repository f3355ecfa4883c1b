"""配置模块"""
from .config import (
    LIMITS_CONFIG, EVALUATOR_CONFIG, SHELL_CONFIG, LOGGING_CONFIG,
    OVERFLOW_MODES, validate_config
)

__all__ = [
    'LIMITS_CONFIG', 'EVALUATOR_CONFIG', 'SHELL_CONFIG', 'LOGGING_CONFIG',
    'OVERFLOW_MODES', 'validate_config'
]
