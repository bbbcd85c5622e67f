import pytest

from core import MalformedExpressionError, StackUnderflowError, format_expression, to_postfix, tokenize


def postfix_of(text):
    return format_expression(to_postfix(tokenize(text)))


def test_precedence_reorders_operators():
    assert postfix_of("1+2*3") == "1.0 2.0 3.0 * +"


def test_parentheses_override_precedence():
    assert postfix_of("(1+2)*3") == "1.0 2.0 + 3.0 *"


def test_equal_precedence_is_left_associative():
    assert postfix_of("8-4-2") == "8.0 4.0 - 2.0 -"
    assert postfix_of("8/4*2") == "8.0 4.0 / 2.0 *"


def test_power_is_also_left_associative():
    # 已知行为：^ 按左结合处理
    assert postfix_of("2^3^2") == "2.0 3.0 ^ 2.0 ^"


def test_postfix_has_no_parentheses_when_balanced():
    assert "(" not in postfix_of("((1+2))*(3-(4/5))")


def test_unclosed_parenthesis_is_passed_through():
    assert postfix_of("(2+3)*(4+ 5.0") == "2.0 3.0 + 4.0 5.0 + ( *"


def test_unmatched_closing_parenthesis_raises():
    with pytest.raises(StackUnderflowError):
        to_postfix(tokenize("1+2)"))
    with pytest.raises(MalformedExpressionError):
        to_postfix(tokenize(")"))


def test_empty_input():
    assert to_postfix([]) == []
