"""核心模块 - Token系统、分词器、调度场转换、RPN评估器和操作符"""
from .errors import (
    ExpressionError, UnrecognizedInputError, MalformedExpressionError, StackUnderflowError
)
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, MIN_PRECEDENCE,
    OPEN_PAREN, CLOSE_PAREN, number_token, make_token, format_expression
)
from .tokenizer import tokenize
from .converter import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'ExpressionError', 'UnrecognizedInputError', 'MalformedExpressionError', 'StackUnderflowError',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'MIN_PRECEDENCE',
    'OPEN_PAREN', 'CLOSE_PAREN', 'number_token', 'make_token', 'format_expression',
    'tokenize', 'to_postfix', 'RPNEvaluator', 'Operators'
]
