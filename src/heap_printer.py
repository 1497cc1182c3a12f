"""Text renderings of an IntHeap as a tree or as a flat array.

Both renderers only read ``heap.items()`` and ``heap.heap_type``.
"""

import sys
from typing import List, Optional, Sequence, TextIO

from int_heap import HeapType, IntHeap

EMPTY = "Empty heap"


def heap_label(heap: IntHeap) -> str:
    return "max-heap" if heap.heap_type is HeapType.MAX else "min-heap"


def render_tree(heap: IntHeap) -> str:
    """Render the heap sideways, one node per line.

    Example for a min-heap built from [3, 1, 2]:

        Heap as tree (min-heap):
        └── 1
            ┌── 3
            └── 2
    """
    items = heap.items()
    if not items:
        return EMPTY
    lines = [f"Heap as tree ({heap_label(heap)}):"]
    _render_node(items, 0, "", True, lines)
    return "\n".join(lines)


def _render_node(items: Sequence[int], index: int, prefix: str,
                 is_last: bool, lines: List[str]) -> None:
    if index >= len(items):
        return
    connector = "└── " if is_last else "┌── "
    lines.append(f"{prefix}{connector}{items[index]}")

    child_prefix = prefix + ("    " if is_last else "│   ")
    left = 2 * index + 1
    right = 2 * index + 2
    has_right = right < len(items)
    if left < len(items):
        _render_node(items, left, child_prefix, not has_right, lines)
    if has_right:
        _render_node(items, right, child_prefix, True, lines)


def render_array(heap: IntHeap) -> str:
    items = heap.items()
    if not items:
        return EMPTY
    values = " ".join(str(v) for v in items)
    return f"Heap as array ({heap_label(heap)}): [{values}]"


def print_tree(heap: IntHeap, file: Optional[TextIO] = None) -> None:
    print(render_tree(heap), file=file or sys.stdout)


def print_array(heap: IntHeap, file: Optional[TextIO] = None) -> None:
    print(render_array(heap), file=file or sys.stdout)
