"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import MalformedExpressionError, StackUnderflowError
from core.operators import Operators
from core.token_system import format_expression

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _pop(stack, token):
        if not stack:
            raise StackUnderflowError(f"Insufficient operands for {token}")
        return stack.pop()

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀Token序列
        Args:
            token_sequence: 后缀形式的Token序列
        Returns:
            float 结果
        Raises:
            MalformedExpressionError: 出现括号、操作数不足或结束时栈中不是恰好一个值
        """
        stack = []

        for token in token_sequence:
            if token.is_number():
                stack.append(token.value)

            elif token.is_operator():
                # 先弹出的是右操作数
                operand2 = RPNEvaluator._pop(stack, token)
                operand1 = RPNEvaluator._pop(stack, token)
                stack.append(Operators.apply(token, operand1, operand2))

            else:
                raise MalformedExpressionError(
                    f"Invalid postfix expression {format_expression(token_sequence)}")

        if len(stack) == 0:
            raise MalformedExpressionError("Empty stack after evaluation")
        if len(stack) > 1:
            logger.debug(f"Stack content: {stack}")
            raise MalformedExpressionError(
                f"Stack has {len(stack)} elements after evaluation, expected 1")
        return stack[0]
