"""core/calculator.py - 一行表达式的完整计算：转换 + 求值"""
import logging
from collections import namedtuple

from config.config import EVALUATOR_CONFIG, OVERFLOW_MODES
from core.converter import InfixConverter, WHITESPACE
from core.errors import CalcError
from core.rpn_evaluator import RPNEvaluator
from core.token_system import render_postfix

logger = logging.getLogger(__name__)

STAGE_CONVERT = "convert"
STAGE_EVALUATE = "evaluate"


class Calculation(namedtuple('Calculation', ['expression', 'postfix', 'value', 'error', 'stage'])):
    """单次计算的结果：成功时 value 有值，失败时 error/stage 指出原因"""
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    def render_postfix(self, unary_symbol='~'):
        if self.postfix is None:
            return None
        return render_postfix(self.postfix, unary_symbol)


class ExpressionCalculator:
    """每次调用都使用新的栈，调用之间不保留任何状态"""

    def __init__(self, limits=None, overflow=None):
        self.converter = InfixConverter(limits)
        self.limits = self.converter.limits
        self.overflow = overflow or EVALUATOR_CONFIG["overflow"]
        if self.overflow not in OVERFLOW_MODES:
            raise ValueError(f"overflow must be one of {OVERFLOW_MODES}, got {self.overflow!r}")

    def calculate(self, expression):
        """
        Args:
            expression: 一行中缀表达式
        Returns:
            Calculation；错误不会抛出，而是记录在结果里
        """
        expression = expression.strip(WHITESPACE)
        try:
            postfix = self.converter.convert(expression)
        except CalcError as e:
            logger.debug(f"Conversion failed for {expression[:50]!r}: {e}")
            return Calculation(expression, None, None, e.with_traceback(None), STAGE_CONVERT)

        try:
            value = RPNEvaluator.evaluate(postfix, limits=self.limits, overflow=self.overflow)
        except CalcError as e:
            logger.debug(f"Evaluation failed for {expression[:50]!r}: {e}")
            return Calculation(expression, postfix, None, e.with_traceback(None), STAGE_EVALUATE)

        return Calculation(expression, postfix, value, None, None)
