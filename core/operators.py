"""core/operators.py - 64位有符号整数运算"""
import logging

import numpy as np

from core.errors import CalcEvaluationError
from core.token_system import OperatorType

_INT64_INFO = np.iinfo(np.int64)
INT64_MAX = int(_INT64_INFO.max)
INT64_MIN = int(_INT64_INFO.min)
_UINT64_MASK = int(np.iinfo(np.uint64).max)

logger = logging.getLogger(__name__)


def in_int64_range(value):
    return INT64_MIN <= value <= INT64_MAX


def wrap_int64(value):
    """按64位补码回绕：取低64位后重新解释为 int64"""
    return int(np.array(value & _UINT64_MASK, dtype=np.uint64).view(np.int64))


class Operators:
    """所有操作符的静态方法集合；操作数和结果都是 int64 范围内的 Python int"""

    @staticmethod
    def fit_int64(value, overflow="wrap"):
        """按溢出策略把精确结果收回 int64 范围"""
        if in_int64_range(value):
            return value
        if overflow == "checked":
            logger.debug(f"Arithmetic overflow: {value}")
            raise CalcEvaluationError("Arithmetic overflow")
        return wrap_int64(value)

    # 一元操作符====================

    @staticmethod
    def neg(operand, overflow="wrap"):
        """一元负号；-INT64_MIN 按策略回绕或报错"""
        return Operators.fit_int64(-operand, overflow)

    # 二元操作符====================

    @staticmethod
    def add(operand1, operand2, overflow="wrap"):
        return Operators.fit_int64(operand1 + operand2, overflow)

    @staticmethod
    def sub(operand1, operand2, overflow="wrap"):
        return Operators.fit_int64(operand1 - operand2, overflow)

    @staticmethod
    def mul(operand1, operand2, overflow="wrap"):
        return Operators.fit_int64(operand1 * operand2, overflow)

    @staticmethod
    def _trunc_div(operand1, operand2):
        # Python 的 // 向下取整，这里改为向零截断
        quotient = abs(operand1) // abs(operand2)
        if (operand1 < 0) != (operand2 < 0):
            quotient = -quotient
        return quotient

    @staticmethod
    def div(operand1, operand2, overflow="wrap"):
        """截断整数除法"""
        if operand2 == 0:
            raise CalcEvaluationError("Division by zero")
        return Operators.fit_int64(Operators._trunc_div(operand1, operand2), overflow)

    @staticmethod
    def mod(operand1, operand2, overflow="wrap"):
        """与截断除法配套的余数，符号跟随被除数"""
        if operand2 == 0:
            raise CalcEvaluationError("Modulo by zero")
        return operand1 - operand2 * Operators._trunc_div(operand1, operand2)

    @staticmethod
    def pow(base, exp, overflow="wrap"):
        """
        平方求幂，只支持非负指数。
        每次乘法前检查 |result| > MAX // |base|，溢出即报错（与 overflow 策略无关）。
        """
        if exp < 0:
            raise CalcEvaluationError("Invalid or overflow in exponentiation")
        result = 1
        while exp:
            if exp & 1:
                if base != 0 and abs(result) > INT64_MAX // abs(base):
                    raise CalcEvaluationError("Invalid or overflow in exponentiation")
                result *= base
            exp >>= 1
            if exp:
                if base != 0 and abs(base) > INT64_MAX // abs(base):
                    raise CalcEvaluationError("Invalid or overflow in exponentiation")
                base *= base
        return result


# OperatorType -> 实现
OPERATOR_FUNCTIONS = {
    OperatorType.ADD: Operators.add,
    OperatorType.SUB: Operators.sub,
    OperatorType.MUL: Operators.mul,
    OperatorType.DIV: Operators.div,
    OperatorType.MOD: Operators.mod,
    OperatorType.POW: Operators.pow,
    OperatorType.NEG: Operators.neg,
}
