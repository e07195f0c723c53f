import pytest

from adtkit.array_stack import ArrayStack, StackEmptyError, main


def test_new_stack_is_empty():
    stack = ArrayStack()
    assert len(stack) == 0
    assert not stack
    assert stack.capacity == 1


def test_push_and_top():
    stack = ArrayStack()
    stack.push("a")
    stack.push("b")
    assert stack.top() == "b"
    assert len(stack) == 2


def test_pop_is_last_in_first_out():
    stack = ArrayStack()
    for item in "ABCDE":
        stack.push(item)
    popped = [stack.pop() for _ in range(5)]
    assert popped == list("EDCBA")
    assert not stack


def test_top_on_empty_raises():
    with pytest.raises(StackEmptyError):
        ArrayStack().top()


def test_pop_on_empty_raises():
    stack = ArrayStack()
    stack.push(1)
    stack.pop()
    with pytest.raises(StackEmptyError):
        stack.pop()


def test_capacity_doubles_when_full():
    stack = ArrayStack()
    stack.push(1)
    assert stack.capacity == 1
    stack.push(2)
    assert stack.capacity == 2
    stack.push(3)
    assert stack.capacity == 4


def test_capacity_is_power_of_two_covering_size():
    stack = ArrayStack()
    for i in range(37):
        stack.push(i)
        cap = stack.capacity
        assert cap >= len(stack)
        assert cap & (cap - 1) == 0
    while stack:
        stack.pop()
        cap = stack.capacity
        assert cap >= len(stack)
        assert cap & (cap - 1) == 0


def test_capacity_shrinks_back_to_one():
    stack = ArrayStack()
    for i in range(20):
        stack.push(i)
    for _ in range(20):
        stack.pop()
    assert stack.capacity == 1


def test_copy_is_independent():
    stack = ArrayStack()
    for i in range(5):
        stack.push(i)
    duplicate = stack.copy()
    duplicate.pop()
    duplicate.push(99)
    assert stack.top() == 4
    assert duplicate.top() == 99
    assert duplicate.capacity == stack.capacity


def test_main_prints_letters_in_reverse(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Pushing 'A' through 'J'"
    assert lines[1] == "Now popping them all off and printing as we go: "
    assert lines[2:] == list("JIHGFEDCBA")