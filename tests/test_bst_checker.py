import pytest

from adtkit.bst_checker import Node, check_bst_validity


def _chain_of_77(length: int) -> tuple[Node, list[Node]]:
    root = Node(77)
    chain = [root]
    current = root
    for _ in range(length):
        current.left = Node(77)
        current = current.left
        chain.append(current)
    return root, chain


def test_parsed_tree_with_left_violation():
    root = Node.parse("(10, (20), (30, (29), (31)))")
    assert root is not None
    bad = check_bst_validity(root)
    assert bad is root.left
    assert bad.key == 20


def test_parsed_valid_tree():
    root = Node.parse("(20, (10), (30, (29), (31)))")
    assert root is not None
    assert check_bst_validity(root) is None


def test_parsed_tree_with_none_children():
    root = Node.parse("(80, (60, (40, (20, None, (50)), None), None), None)")
    assert root is not None
    assert root.right is None
    bad = check_bst_validity(root)
    assert bad is not None
    assert bad.key == 50


def test_insert_all_builds_valid_tree():
    keys = [77, 75, 73, 71, 76, 54, 19, 91, 12]
    root = Node(68)
    root.insert_all(keys)
    assert root.count() == len(keys) + 1
    assert check_bst_validity(root) is None


def test_right_child_smaller_than_root():
    node22 = Node(22, Node(11), Node(33))
    bad = Node(40, None, Node(50))
    root = Node(44, node22, bad)
    assert check_bst_validity(root) is bad


def test_left_grandchild_below_bound():
    bad = Node(86)
    root = Node(
        90,
        Node(80, bad, Node(89)),
        Node(91, None, Node(98, None, Node(99))),
    )
    assert check_bst_validity(root) is bad


def test_deep_violation_in_right_subtree():
    bad = Node(55)
    root = Node(
        59,
        Node(38, Node(37), Node(41)),
        Node(71, Node(65, Node(62), None), Node(84, bad, None)),
    )
    assert check_bst_validity(root) is bad


def test_child_pointing_to_root_left():
    root, chain = _chain_of_77(50)
    last = chain[-1]
    last.right = root.left
    assert check_bst_validity(root) is last


def test_child_pointing_to_deeper_ancestor():
    root, chain = _chain_of_77(50)
    last = chain[-1]
    last.right = chain[9]
    assert check_bst_validity(root) is last


def test_child_pointing_to_parent():
    root_right = Node(89)
    root = Node(87, Node(51), root_right)
    bad = Node(91, root_right, None)
    root_right.right = bad
    assert check_bst_validity(root) is bad


def test_child_pointing_to_non_root_ancestor():
    root = Node(51, Node(27, Node(14), None), None)
    bad = Node(92)
    node83 = Node(83, Node(77), bad)
    node72 = Node(72, None, node83)
    bad.left = node72
    root.right = node72
    assert check_bst_validity(root) is bad


def test_empty_tree_is_valid():
    assert check_bst_validity(None) is None


def test_equal_keys_are_allowed_on_both_sides():
    root = Node(5, Node(5), Node(5))
    assert check_bst_validity(root) is None


def test_insert_sends_equal_keys_right():
    root = Node(10)
    root.insert(Node(10))
    root.insert(Node(3))
    assert root.right is not None and root.right.key == 10
    assert root.left is not None and root.left.key == 3


def test_parse_single_key():
    node = Node.parse("  (42)")
    assert node is not None
    assert node.key == 42
    assert node.left is None and node.right is None


def test_parse_round_trip_counts_nodes():
    root = Node.parse("(10, (20), (30, (29), (31)))")
    assert root is not None
    assert root.count() == 5
    assert [root.right.left.key, root.right.right.key] == [29, 31]


@pytest.mark.parametrize("text", ["", "   ", "10", "(1, (2)", "(1, (2))", "null"])
def test_parse_rejects_malformed(text):
    assert Node.parse(text) is None


def test_parse_rejects_non_integer_key():
    with pytest.raises(ValueError):
        Node.parse("(abc)")