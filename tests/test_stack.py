import pytest

from core.errors import CalcCapacityError
from core.stack import BoundedStack


def test_push_pop_peek():
    stack = BoundedStack(3, "full")
    assert stack.is_empty()
    assert not stack
    stack.push(1)
    stack.push(2)
    assert stack.peek() == 2
    assert len(stack) == 2
    assert list(stack) == [1, 2]
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.is_empty()


def test_capacity_is_enforced():
    stack = BoundedStack(2, "Value stack overflow")
    stack.push(1)
    stack.push(2)
    with pytest.raises(CalcCapacityError) as exc_info:
        stack.push(3)
    assert str(exc_info.value) == "Value stack overflow"
    assert len(stack) == 2


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        BoundedStack(0, "full")
