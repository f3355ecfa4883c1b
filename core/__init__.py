"""核心模块 - Token系统、调度场转换器、RPN评估器和操作符"""
from .token_system import (
    TokenType, OperatorType, Associativity, Token,
    OPERATOR_DEFINITIONS, SYMBOL_TO_OPERATOR, render_postfix
)
from .errors import (
    ErrorKind, CalcError, CalcLexicalError, CalcSyntaxError,
    CalcCapacityError, CalcEvaluationError
)
from .stack import BoundedStack
from .operators import Operators, INT64_MAX, INT64_MIN
from .converter import InfixConverter, to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate_postfix
from .calculator import ExpressionCalculator, Calculation

__all__ = [
    'TokenType', 'OperatorType', 'Associativity', 'Token',
    'OPERATOR_DEFINITIONS', 'SYMBOL_TO_OPERATOR', 'render_postfix',
    'ErrorKind', 'CalcError', 'CalcLexicalError', 'CalcSyntaxError',
    'CalcCapacityError', 'CalcEvaluationError',
    'BoundedStack', 'Operators', 'INT64_MAX', 'INT64_MIN',
    'InfixConverter', 'to_postfix',
    'RPNEvaluator', 'evaluate_postfix',
    'ExpressionCalculator', 'Calculation'
]
