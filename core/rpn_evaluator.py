"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import LIMITS_CONFIG, EVALUATOR_CONFIG, OVERFLOW_MODES
from core.errors import CalcEvaluationError
from core.operators import OPERATOR_FUNCTIONS, in_int64_range
from core.stack import BoundedStack
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def parse_integer(token):
        """整数字面量 -> int，超出 int64 范围视为非法"""
        text = token.text or ''
        if not text.isascii() or not text.isdigit():
            raise CalcEvaluationError("Invalid number in postfix", pos=token.pos)
        value = int(text)
        if not in_int64_range(value):
            raise CalcEvaluationError("Invalid number in postfix", pos=token.pos)
        return value

    @staticmethod
    def evaluate(token_sequence, limits=None, overflow=None):
        """
        Args:
            token_sequence: 后缀顺序的Token序列
            limits: 覆盖 LIMITS_CONFIG 的字典
            overflow: "wrap" 或 "checked"，默认取 EVALUATOR_CONFIG
        Returns:
            int64 范围内的整数结果
        """
        limits = dict(LIMITS_CONFIG, **(limits or {}))
        overflow = overflow or EVALUATOR_CONFIG["overflow"]
        if overflow not in OVERFLOW_MODES:
            raise ValueError(f"overflow must be one of {OVERFLOW_MODES}, got {overflow!r}")
        stack = BoundedStack(limits["max_tokens"], "Value stack overflow")

        for token in token_sequence:
            if token.type is TokenType.INTEGER:
                stack.push(RPNEvaluator.parse_integer(token))
                continue

            if token.type is not TokenType.OPERATOR:
                logger.debug(f"Unexpected token in postfix: {token!r}")
                raise CalcEvaluationError("Unknown operator in evaluation", pos=token.pos)

            func = OPERATOR_FUNCTIONS[token.op]

            # ================== 一元操作符处理 ==================
            if token.spec.arity == 1:
                if len(stack) < 1:
                    raise CalcEvaluationError("Not enough operands for unary minus", pos=token.pos)
                operand = stack.pop()
                stack.push(func(operand, overflow))

            # ================== 二元操作符处理 ==================
            else:
                if len(stack) < 2:
                    raise CalcEvaluationError("Not enough operands for binary operator",
                                              pos=token.pos)
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.push(func(operand1, operand2, overflow))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise CalcEvaluationError("Extra operands or insufficient operators")
        return stack.pop()


def evaluate_postfix(token_sequence, limits=None, overflow=None):
    return RPNEvaluator.evaluate(token_sequence, limits=limits, overflow=overflow)
