"""core/token_system.py"""
import sys
from enum import Enum

from core.errors import UnrecognizedInputError

# 非操作符的优先级：最小整数，出栈比较永远不会触发
MIN_PRECEDENCE = -sys.maxsize - 1

NUMBER_CHARS = frozenset('0123456789.')


class TokenType(Enum):
    NUMBER = "number"      # 数值
    OPERATOR = "operator"  # 二元操作符
    GROUPING = "grouping"  # 括号


class Token:
    """不可变的表达式元素，三种变体共用一个类，由 type 区分"""

    __slots__ = ('_type', '_name', '_symbol', '_value', '_precedence')

    def __init__(self, token_type, name, symbol=None, value=None, precedence=MIN_PRECEDENCE):
        object.__setattr__(self, '_type', token_type)
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_symbol', symbol)
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_precedence', precedence)

    def __setattr__(self, key, value):
        raise AttributeError(f"Token is immutable, cannot set '{key}'")

    def __delattr__(self, key):
        raise AttributeError(f"Token is immutable, cannot delete '{key}'")

    @property
    def type(self):
        return self._type

    @property
    def name(self):
        return self._name

    @property
    def symbol(self):
        return self._symbol

    @property
    def value(self):
        return self._value

    @property
    def precedence(self):
        if self._type == TokenType.OPERATOR:
            return self._precedence
        return MIN_PRECEDENCE

    def is_number(self):
        return self._type == TokenType.NUMBER

    def is_operator(self):
        return self._type == TokenType.OPERATOR

    def is_grouping(self):
        return self._type == TokenType.GROUPING

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self._type, self._symbol, self._value) == (other._type, other._symbol, other._value)

    def __hash__(self):
        return hash((self._type, self._symbol, self._value))

    def __str__(self):
        if self._type == TokenType.NUMBER:
            return repr(self._value)
        return self._symbol

    def __repr__(self):
        return f"{self._type.name.capitalize()}({self})"


# Token定义字典：操作符与括号是单例，数值按需创建
TOKEN_DEFINITIONS = {
    # 二元操作符（优先级越高结合越紧）
    '+': Token(TokenType.OPERATOR, 'plus', '+', precedence=1),
    '-': Token(TokenType.OPERATOR, 'minus', '-', precedence=1),
    '*': Token(TokenType.OPERATOR, 'times', '*', precedence=2),
    '/': Token(TokenType.OPERATOR, 'div', '/', precedence=2),
    '^': Token(TokenType.OPERATOR, 'pow', '^', precedence=3),

    # 括号
    '(': Token(TokenType.GROUPING, 'open_paren', '('),
    ')': Token(TokenType.GROUPING, 'close_paren', ')'),
}

OPERATOR_SYMBOLS = ''.join(s for s, t in TOKEN_DEFINITIONS.items() if t.is_operator())
GROUPING_SYMBOLS = ''.join(s for s, t in TOKEN_DEFINITIONS.items() if t.is_grouping())

OPEN_PAREN = TOKEN_DEFINITIONS['(']
CLOSE_PAREN = TOKEN_DEFINITIONS[')']


def number_token(value):
    """创建数值 Token"""
    return Token(TokenType.NUMBER, 'number', value=float(value))


def parse_number(text):
    """数字串 -> 数值 Token；不是合法数值时返回 None"""
    if text == '.':
        # 单独的小数点视为 0.0
        return number_token(0.0)
    if not text or any(ch not in NUMBER_CHARS for ch in text):
        return None
    try:
        return number_token(float(text))
    except ValueError:
        return None


def parse_operator(ch):
    if len(ch) == 1 and ch in OPERATOR_SYMBOLS:
        return TOKEN_DEFINITIONS[ch]
    return None


def parse_grouping(ch):
    if len(ch) == 1 and ch in GROUPING_SYMBOLS:
        return TOKEN_DEFINITIONS[ch]
    return None


def make_token(text):
    """
    单个字符或连续数字串 -> Token
    按 Number、Operator、Grouping 的顺序尝试，都不匹配则抛出 UnrecognizedInputError
    """
    if not text:
        raise UnrecognizedInputError(text)

    if len(text) > 1:
        token = parse_number(text)
        if token is None:
            raise UnrecognizedInputError(text)
        return token

    token = parse_number(text) or parse_operator(text) or parse_grouping(text)
    if token is None:
        raise UnrecognizedInputError(text, f"Unrecognized character {text}")
    return token


def format_expression(token_sequence):
    """Token序列 -> 空格分隔的字符串，用于日志"""
    return ' '.join(str(t) for t in token_sequence)
