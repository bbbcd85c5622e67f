"""core/converter.py - 调度场算法：中缀 -> 后缀(RPN)"""
import logging

from core.errors import StackUnderflowError
from core.token_system import OPEN_PAREN, CLOSE_PAREN, format_expression

logger = logging.getLogger(__name__)


def to_postfix(token_sequence):
    """
    中缀Token序列转换为后缀Token序列

    同优先级时先出栈（左结合），对 ^ 也一样，所以 2^3^2 按 (2^3)^2 计算。
    未闭合的左括号会原样进入输出，由求值阶段报错。
    """
    stack = []
    postfix = []

    for token in token_sequence:
        if token.is_number():
            postfix.append(token)
        elif token == OPEN_PAREN:
            stack.append(token)
        elif token == CLOSE_PAREN:
            while stack and stack[-1] != OPEN_PAREN:
                postfix.append(stack.pop())
            if not stack:
                logger.debug(f"Unmatched ')' in {format_expression(token_sequence)}")
                raise StackUnderflowError("Unmatched closing parenthesis")
            stack.pop()
        else:
            while stack and stack[-1].precedence >= token.precedence:
                postfix.append(stack.pop())
            stack.append(token)

    while stack:
        postfix.append(stack.pop())

    logger.debug(f"Postfix: {format_expression(postfix)}")
    return postfix
