"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    INTEGER = "integer"          # 整数字面量
    OPERATOR = "operator"        # 操作符
    LEFT_PAREN = "left_paren"    # (
    RIGHT_PAREN = "right_paren"  # ) 只在扫描时出现，不进入任何序列


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorType(Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    POW = "pow"
    NEG = "neg"  # 一元负号，与二元减号 SUB 区分


class OperatorSpec:
    def __init__(self, op, symbol, display, precedence, associativity, arity):
        self.op = op
        self.symbol = symbol            # 输入中的字符，NEG 与 SUB 共用 '-'
        self.display = display          # 后缀输出中的显示
        self.precedence = precedence
        self.associativity = associativity
        self.arity = arity

    @property
    def is_left_assoc(self):
        return self.associativity is Associativity.LEFT


# 操作符定义字典
OPERATOR_DEFINITIONS = {
    OperatorType.ADD: OperatorSpec(OperatorType.ADD, '+', '+', 1, Associativity.LEFT, 2),
    OperatorType.SUB: OperatorSpec(OperatorType.SUB, '-', '-', 1, Associativity.LEFT, 2),
    OperatorType.MUL: OperatorSpec(OperatorType.MUL, '*', '*', 2, Associativity.LEFT, 2),
    OperatorType.DIV: OperatorSpec(OperatorType.DIV, '/', '/', 2, Associativity.LEFT, 2),
    OperatorType.MOD: OperatorSpec(OperatorType.MOD, '%', '%', 2, Associativity.LEFT, 2),
    OperatorType.POW: OperatorSpec(OperatorType.POW, '^', '^', 3, Associativity.RIGHT, 2),
    # 一元负号：最高优先级，右结合
    OperatorType.NEG: OperatorSpec(OperatorType.NEG, '-', '~', 4, Associativity.RIGHT, 1),
}

# 输入字符 -> 二元操作符；'-' 是否为一元负号由转换器根据上下文决定
SYMBOL_TO_OPERATOR = {
    spec.symbol: op for op, spec in OPERATOR_DEFINITIONS.items()
    if spec.arity == 2
}


class Token:
    """不可变的token；INTEGER 保存字面文本，OPERATOR 保存 OperatorType"""
    __slots__ = ('type', 'text', 'op', 'pos')

    def __init__(self, token_type, text=None, op=None, pos=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'op', op)
        object.__setattr__(self, 'pos', pos)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @classmethod
    def integer(cls, text, pos=None):
        return cls(TokenType.INTEGER, text=text, pos=pos)

    @classmethod
    def operator(cls, op, pos=None):
        return cls(TokenType.OPERATOR, text=OPERATOR_DEFINITIONS[op].symbol, op=op, pos=pos)

    @classmethod
    def left_paren(cls, pos=None):
        return cls(TokenType.LEFT_PAREN, text='(', pos=pos)

    @property
    def spec(self):
        return OPERATOR_DEFINITIONS.get(self.op)

    def is_operator(self):
        return self.type is TokenType.OPERATOR

    def display(self, unary_symbol='~'):
        if self.op is OperatorType.NEG:
            return unary_symbol
        if self.is_operator():
            return self.spec.display
        return self.text

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        # pos 只用于诊断，不参与相等比较
        return (self.type, self.text, self.op) == (other.type, other.text, other.op)

    def __hash__(self):
        return hash((self.type, self.text, self.op))

    def __repr__(self):
        if self.is_operator():
            return f"Token({self.op.name})"
        return f"Token({self.type.name}, {self.text!r})"


def render_postfix(tokens, unary_symbol='~'):
    """后缀序列 -> 空格分隔的字符串，一元负号单独显示"""
    return ' '.join(token.display(unary_symbol) for token in tokens)
