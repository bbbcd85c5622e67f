"""core/errors.py - 表达式求值的异常层次"""


class ExpressionError(Exception):
    """所有表达式错误的基类"""


class UnrecognizedInputError(ExpressionError):
    """字符或数字串无法识别为 Number/Operator/Grouping"""

    def __init__(self, text, message=None):
        self.text = text
        super().__init__(message or f"Unrecognized input {text}")


class MalformedExpressionError(ExpressionError):
    """后缀表达式结构非法（操作数不足、栈中剩余多个值等）"""


class StackUnderflowError(MalformedExpressionError):
    """从空栈弹出（多余的右括号或缺少操作数）"""

    def __init__(self, message="Stack underflow"):
        super().__init__(message)
