import heapq
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import count
from typing import Any, TypeAlias

import tqdm  # noqa

from coders.abc import CodeMap, Encoder, FrequencyTable, Symbol
from coders.frequency import count_frequencies

# Code given to the only symbol of a one-symbol alphabet, whose tree has no edges
LONE_LEAF_CODE = "0"


@dataclass(frozen=True)
class Leaf:
    symbol: Symbol
    frequency: int


@dataclass(frozen=True)
class Internal:
    frequency: int
    left: "Node"
    right: "Node"


Node: TypeAlias = Leaf | Internal


def build_tree(freqs: FrequencyTable) -> Node | None:
    """Merge the two lightest nodes until one root is left.

    The heap is keyed by (frequency, sequence number). Leaves take sequence
    numbers in table order and every merged node takes the next free one, so
    among equal frequencies the node inserted first is popped first. The
    first node popped becomes the left child.
    """
    seq = count()
    heap: list[tuple[int, int, Node]] = []
    for s, f in freqs.items():
        if f <= 0:
            raise ValueError(f"Frequency of {s!r} must be positive, got {f}")
        heap.append((f, next(seq), Leaf(s, f)))
    if not heap:
        return None
    heapq.heapify(heap)

    while len(heap) > 1:
        f1, _, left = heapq.heappop(heap)
        f2, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (f1 + f2, next(seq), Internal(f1 + f2, left, right)))

    return heap[0][2]


def leaves(root: Node | None) -> Iterator[Leaf]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def derive_codes(root: Node | None) -> CodeMap:
    """Walk the tree depth-first, appending "0" to the left and "1" to the right.

    Leaves are visited left to right, so the returned map is ordered that way.
    """
    if root is None:
        return {}
    if isinstance(root, Leaf):
        return {root.symbol: LONE_LEAF_CODE}

    codes: CodeMap = {}
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            codes[node.symbol] = path
        else:
            stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))
    return codes


def encode_symbols(data: Sequence[Symbol], codes: CodeMap,
                   progress: bool = False) -> str:
    bits: list[str] = []
    for s in tqdm.tqdm(data, desc="Encoding", disable=not progress):
        code = codes.get(s)
        if code is None:
            # codes built from the same data always cover every symbol
            raise RuntimeError(f"Encoding failed: symbol {s!r} has no code")
        bits.append(code)
    return "".join(bits)


class Huffman(Encoder):
    def __init__(self) -> None:
        self.A: list[Symbol] = []
        self.freqs: FrequencyTable = {}
        self.root: Node | None = None
        self.codes: CodeMap = {}

    def build(self, data: Sequence[Symbol]) -> CodeMap:
        self.freqs = count_frequencies(data)
        self.A = list(self.freqs)
        self.root = build_tree(self.freqs)
        self.codes = derive_codes(self.root)
        return self.codes

    def encode(self, data: Sequence[Symbol],
               progress: bool = False) -> dict[str, Any]:
        self.build(data)
        encoded = encode_symbols(data, self.codes, progress=progress)

        meta: dict[str, Any] = {
            "A": self.A,
            "F": [self.freqs[a] for a in self.A],
            "codes": dict(self.codes),
            "length": len(data),
        }
        return {"data": encoded, "meta": meta}
