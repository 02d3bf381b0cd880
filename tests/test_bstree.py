import pytest

from algclab.bstree import BSTree

NUMS = [8, 4, 9, 4, 3, 1, 10, 0, 2, 5, 7, 8, 6]


def cmp(a, b):
    return (a > b) - (a < b)


def build():
    tree = BSTree(cmp, str)
    results = [tree.add(n) for n in NUMS]
    return tree, results


def test_empty_tree():
    tree = BSTree(cmp, str)
    assert len(tree) == 0
    assert tree.height() == -1
    assert tree.is_empty()
    with pytest.raises(ValueError):
        tree.min()
    with pytest.raises(ValueError):
        tree.max()


def test_add_rejects_duplicates():
    tree, results = build()
    assert results[3] is False
    assert results[11] is False
    assert results.count(True) == len(set(NUMS))
    assert len(tree) == len(set(NUMS))


def test_query_functions():
    tree, _ = build()
    assert tree.height() == 4
    assert tree.min() == min(NUMS)
    assert tree.max() == max(NUMS)
    assert not tree.is_empty()


def test_contains():
    tree, _ = build()
    for n in range(-1, len(NUMS) + 3, 3):
        assert (n in tree) == (n in NUMS)


def test_in_order_traversal():
    tree, _ = build()
    seen = []
    tree.traverse_in_order(seen.append)
    assert seen == sorted(set(NUMS))
    assert list(tree) == seen
    assert [tree.kth_item(i) for i in range(len(tree))] == seen


def test_remove_by_value():
    tree, _ = build()
    outcome = [tree.remove(NUMS[i]) for i in range(1, len(NUMS), 2)]
    targets = [NUMS[i] for i in range(1, len(NUMS), 2)]
    assert outcome[1] is False
    assert all(outcome[:1] + outcome[2:])
    assert list(tree) == sorted(set(NUMS) - set(targets))
    assert len(tree) == len(set(NUMS) - set(targets))


def test_remove_by_index_from_the_end():
    tree, _ = build()
    removed = [tree.remove_kth_item(i - 1) for i in range(len(tree), 0, -1)]
    assert removed == sorted(set(NUMS), reverse=True)
    assert len(tree) == 0
    assert tree.height() == -1


def test_remove_node_with_two_children_keeps_order():
    tree, _ = build()
    assert tree.remove(8) is True
    assert 8 not in tree
    assert list(tree) == sorted(set(NUMS) - {8})


def test_kth_item_out_of_range():
    tree, _ = build()
    with pytest.raises(IndexError):
        tree.kth_item(len(tree))
    with pytest.raises(IndexError):
        tree.remove_kth_item(-1)


def test_view_single_node():
    tree = BSTree(cmp)
    tree.add(5)
    assert tree.view() == "   /#\n:5\n   \\#\nnumNodes: 1\n"


def test_view_uses_renderer():
    tree = BSTree(cmp, lambda n: f"<{n}>")
    tree.add(2)
    tree.add(1)
    text = tree.view()
    assert "<1>" in text and "<2>" in text
    assert text.endswith("numNodes: 2\n")