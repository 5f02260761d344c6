from coders.abc import CodeMap, Symbol
from coders.huffman import Leaf, Node


def ch(s: Symbol) -> str:
    if isinstance(s, int):
        if 32 <= s < 127:
            return chr(s)
        elif s == ord("\n"):
            return "\\n"
        elif 0 <= s < 256:
            return f"\\x{s:02x}"
        return str(s)
    if isinstance(s, str) and len(s) == 1:
        if s == "\n":
            return "\\n"
        elif s == "\t":
            return "\\t"
        elif s.isprintable():
            return s
        return f"\\u{ord(s):04x}"
    return str(s)


def format_code_table(codes: CodeMap) -> list[str]:
    return [f"{ch(s)}: {code}" for s, code in codes.items()]


def render_tree(root: Node | None) -> list[str]:
    """Box-drawing diagram of the tree, one line per node in pre-order.

    Leaves show as 'c' (freq), internal nodes as # (freq). A first child is
    drawn with "├──" and a second child with "└──"; the root counts as a
    first child.
    """
    lines: list[str] = []
    stack: list[tuple[Node, str, bool]] = []
    if root is not None:
        stack.append((root, "", True))
    while stack:
        node, prefix, is_left = stack.pop()
        branch = "├──" if is_left else "└──"
        if isinstance(node, Leaf):
            lines.append(f"{prefix}{branch}'{ch(node.symbol)}' ({node.frequency})")
            continue
        lines.append(f"{prefix}{branch}# ({node.frequency})")
        child_prefix = prefix + ("│   " if is_left else "    ")
        stack.append((node.right, child_prefix, False))
        stack.append((node.left, child_prefix, True))
    return lines
