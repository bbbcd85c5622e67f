"""core/operators.py"""
import numpy as np


class Operators:
    """二元操作符的静态方法集合，按 IEEE-754 双精度计算"""

    @staticmethod
    def _binary(func, operand1, operand2):
        # 除零、溢出不抛异常：x/0 -> inf，0/0 -> nan
        with np.errstate(all='ignore'):
            result = func(np.float64(operand1), np.float64(operand2))
        return float(result)

    @staticmethod
    def plus(operand1, operand2):
        """加法操作符"""
        return Operators._binary(np.add, operand1, operand2)

    @staticmethod
    def minus(operand1, operand2):
        """减法操作符"""
        return Operators._binary(np.subtract, operand1, operand2)

    @staticmethod
    def times(operand1, operand2):
        """乘法操作符"""
        return Operators._binary(np.multiply, operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，不做除零保护"""
        return Operators._binary(np.true_divide, operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        """幂运算，负数的非整数次幂得到 nan"""
        return Operators._binary(np.power, operand1, operand2)

    @staticmethod
    def apply(token, operand1, operand2):
        """按操作符 Token 的 name 分派"""
        op_method = getattr(Operators, token.name, None)
        if op_method is None:
            raise ValueError(f"Unknown operator: {token.name}")
        return op_method(operand1, operand2)
