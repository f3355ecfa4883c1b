"""core/converter.py - 中缀 -> 后缀（调度场算法）"""
import logging

from config.config import LIMITS_CONFIG
from core.errors import CalcLexicalError, CalcSyntaxError
from core.stack import BoundedStack
from core.token_system import Token, TokenType, OperatorType, SYMBOL_TO_OPERATOR

logger = logging.getLogger(__name__)

# 与 C 的 isspace 一致，不含 \x1c-\x1f、U+00A0 等
WHITESPACE = " \t\n\v\f\r"


def _is_digit(ch):
    # 只接受 ASCII 数字，str.isdigit 会接受 '²' 之类
    return '0' <= ch <= '9'


class InfixConverter:
    """
    把一行中缀表达式转换为后缀token序列。

    expect_operand 是唯一的解析上下文：为真时 '-' 解释为一元负号，
    其他操作符则是位置错误。
    """

    def __init__(self, limits=None):
        self.limits = dict(LIMITS_CONFIG, **(limits or {}))

    def convert(self, expression):
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            后缀顺序的 Token 元组
        Raises:
            CalcError 的子类
        """
        max_tokens = self.limits["max_tokens"]
        output = BoundedStack(max_tokens, "Too many tokens")
        ops = BoundedStack(max_tokens, "Operator stack overflow")
        expect_operand = True

        i = 0
        n = len(expression)
        while i < n:
            ch = expression[i]

            if ch in WHITESPACE:
                i += 1
                continue

            # 数字
            if _is_digit(ch):
                start = i
                i = self._scan_number(expression, i)
                output.push(Token.integer(expression[start:i], pos=start))
                expect_operand = False
                continue

            # 括号
            if ch == '(':
                ops.push(Token.left_paren(pos=i))
                expect_operand = True
                i += 1
                continue

            if ch == ')':
                self._close_paren(ops, output)
                expect_operand = False
                i += 1
                continue

            # 操作符（含一元负号）
            if ch in SYMBOL_TO_OPERATOR:
                op = SYMBOL_TO_OPERATOR[ch]
                if expect_operand:
                    if op is not OperatorType.SUB:
                        raise CalcSyntaxError("Unexpected operator", pos=i)
                    op = OperatorType.NEG
                token = Token.operator(op, pos=i)
                self._pop_higher(ops, output, token)
                ops.push(token)
                # 任何操作符（含一元负号）之后都需要操作数
                expect_operand = True
                i += 1
                continue

            raise CalcLexicalError(f"Invalid character: '{ch}'", pos=i)

        # 清空操作符栈
        while ops:
            top = ops.pop()
            # ')' 从不入栈，剩下的只可能是未闭合的 '('
            if top.type is TokenType.LEFT_PAREN:
                raise CalcSyntaxError("Mismatched parentheses", pos=top.pos)
            output.push(top)

        if expect_operand:
            raise CalcSyntaxError("Expression ends unexpectedly", pos=n)

        postfix = tuple(output)
        logger.debug(f"Converted {expression.strip()!r} into {len(postfix)} postfix tokens")
        return postfix

    def _scan_number(self, expression, i):
        """返回数字串结束位置；超过 max_token_len - 1 位报错"""
        max_digits = self.limits["max_token_len"] - 1
        start = i
        while i < len(expression) and _is_digit(expression[i]):
            if i - start >= max_digits:
                raise CalcLexicalError("Number token too long", pos=start)
            i += 1
        return i

    @staticmethod
    def _close_paren(ops, output):
        """弹出操作符直到匹配的 '('，'(' 本身丢弃"""
        while ops:
            top = ops.pop()
            if top.type is TokenType.LEFT_PAREN:
                return
            output.push(top)
        raise CalcSyntaxError("Mismatched parentheses")

    @staticmethod
    def _pop_higher(ops, output, token):
        """栈顶优先级更高，或优先级相同且当前操作符左结合时，弹出到输出"""
        current = token.spec
        while ops and ops.peek().is_operator():
            top = ops.peek().spec
            if (top.precedence > current.precedence
                    or (top.precedence == current.precedence and current.is_left_assoc)):
                output.push(ops.pop())
            else:
                break


def to_postfix(expression, limits=None):
    """InfixConverter(limits).convert(expression) 的简写"""
    return InfixConverter(limits).convert(expression)
