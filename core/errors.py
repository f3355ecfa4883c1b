"""core/errors.py - 计算器错误类型"""
from enum import Enum


class ErrorKind(Enum):
    LEXICAL = "lexical"        # 非法字符、数字过长
    SYNTAX = "syntax"          # 括号不匹配、操作符位置错误
    CAPACITY = "capacity"      # 超出容量上限
    EVALUATION = "evaluation"  # 求值阶段错误


class CalcError(ValueError):
    """所有计算错误的基类，携带错误类别与消息"""
    kind = None

    def __init__(self, message, pos=None):
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"{self.__class__.__name__}({self.message!r})"


class CalcLexicalError(CalcError):
    kind = ErrorKind.LEXICAL


class CalcSyntaxError(CalcError):
    kind = ErrorKind.SYNTAX


class CalcCapacityError(CalcError):
    kind = ErrorKind.CAPACITY


class CalcEvaluationError(CalcError):
    kind = ErrorKind.EVALUATION
