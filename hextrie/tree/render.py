from hextrie.helpers import NIBBLE_TO_HEX

ROOT_LABEL = "(root)"
BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def _value_suffix(node):
    if node.value is None:
        return ""
    return f" = {node.value}"


def render_tree(root):
    """Draw a tree diagram of a node and everything below it.

    The root gets its own line; every other node is drawn under its parent with
    the hex digit that leads to it, followed by its value if it has one:

        (root)
        ├── a
        │   └── 1 = leaf-A1
        └── b = leaf-B

    Children are visited in nibble order. The tree is never modified.

    Args:
        root (HexTrieNode): The node to draw from.

    Returns:
        str: The diagram, one line per node, without a trailing newline.
    """
    lines = [f"{ROOT_LABEL}{_value_suffix(root)}"]
    # (node, nibble, indent, is_last)
    stack = []

    def push_children(node, indent):
        children = list(node.iter_children())
        for i, (nibble, child) in reversed(list(enumerate(children))):
            stack.append((child, nibble, indent, i == len(children) - 1))

    push_children(root, "")
    while stack:
        node, nibble, indent, is_last = stack.pop()
        glyph = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{indent}{glyph}{NIBBLE_TO_HEX[nibble]}{_value_suffix(node)}")
        push_children(node, indent + (SPACE if is_last else PIPE))
    return "\n".join(lines)
