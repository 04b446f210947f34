import io

from bintree_kit.node import Node
from bintree_kit.render import print_tree, render


def _full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_render_full_tree():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_full_tree()) == expected


def test_render_two_children():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    assert render(root) == "  .--(098)--.\n(012)     (402)\n"


def test_render_after_left_insertions():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    root.insert_left(54)
    expected = (
        "       .--(098)-------.\n"
        "  .--(054)       .--(402)\n"
        "(012)          (128)\n"
    )
    assert render(root) == expected


def test_render_single_and_empty():
    assert render(Node(98)) == "(098)\n"
    assert render(None) == ""


def test_render_wide_and_negative_labels():
    assert render(Node(-5)) == "(-05)\n"
    assert render(Node(1234)) == "(1234)\n"


def test_print_tree_to_file():
    buffer = io.StringIO()
    print_tree(_full_tree(), buffer)
    assert buffer.getvalue() == render(_full_tree())
    assert buffer.getvalue().count("\n") == 3


def test_print_tree_to_stdout(capsys):
    print_tree(Node(7))
    assert capsys.readouterr().out == "(007)\n"


def test_print_tree_none_prints_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""