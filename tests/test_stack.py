import pytest

from rpncalc.stack import (
    STACK_SIZE,
    Stack,
    StackEmptyError,
    StackError,
    StackFullError,
)


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_push_adds_value_on_top():
    stack = Stack()
    stack.push(10.1)
    assert len(stack) == 1
    assert stack.peek() == 10.1


def test_not_empty_after_push():
    stack = Stack()
    stack.push(10.1)
    assert not stack.is_empty()


def test_not_full_after_one_push():
    stack = Stack()
    stack.push(10.1)
    assert not stack.is_full()


def test_size_after_one_push():
    stack = Stack()
    stack.push(10.1)
    assert len(stack) == 1


def test_pop_removes_top_element():
    stack = Stack()
    stack.push(10.1)
    assert stack.pop() == 10.1
    assert len(stack) == 0
    assert stack.is_empty()


def test_pop_empty_raises():
    stack = Stack()
    stack.push(10.1)
    stack.pop()
    with pytest.raises(StackEmptyError):
        stack.pop()


def test_peek_empty_raises():
    with pytest.raises(StackEmptyError):
        Stack().peek()


def test_push_after_pop_then_second_push():
    stack = Stack()
    stack.push(10.1)
    stack.pop()
    stack.push(234243.1)
    assert len(stack) == 1
    assert stack.peek() == 234243.1
    stack.push(-234243.1)
    assert len(stack) == 2
    assert stack.peek() == -234243.1
    assert not stack.is_full()


def test_full_at_capacity():
    stack = Stack()
    for value in range(STACK_SIZE):
        stack.push(value)
    assert stack.is_full()
    assert len(stack) == 20
    with pytest.raises(StackFullError):
        stack.push(1.0)
    assert len(stack) == 20


def test_last_in_first_out_order():
    stack = Stack()
    values = [1.5, -2.0, 3.25, 0.0]
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == list(reversed(values))


def test_custom_capacity():
    stack = Stack(capacity=2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(capacity=0)


def test_errors_share_base_class():
    with pytest.raises(StackError):
        Stack().pop()