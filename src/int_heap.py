"""Array-backed binary heap of integers, min or max ordered.

The direction is fixed at construction. pop() on an empty heap raises
EmptyHeapError; peek() on an empty heap returns 0.
"""

from enum import Enum
from numbers import Integral
from typing import Iterable, Iterator, List, Tuple, Union


def _as_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"heap holds integers, got {type(value).__name__}")
    return int(value)


class HeapType(Enum):
    MIN = "min"
    MAX = "max"


class EmptyHeapError(IndexError):
    pass


class IntHeap:
    def __init__(self, heap_type: Union[HeapType, str] = HeapType.MIN) -> None:
        try:
            self._heap_type = HeapType(heap_type)
        except ValueError:
            raise ValueError(f"unknown heap type: {heap_type!r}") from None
        self._data: List[int] = []

    @property
    def heap_type(self) -> HeapType:
        return self._heap_type

    def push(self, value: int) -> None:
        self._data.append(_as_int(value))
        self._sift_up(len(self._data) - 1)

    def pop(self) -> int:
        if not self._data:
            raise EmptyHeapError("pop from empty heap")
        if len(self._data) == 1:
            return self._data.pop()
        result = self._data[0]
        self._data[0] = self._data.pop()
        self._sift_down(0)
        return result

    def peek(self) -> int:
        """Return the top element, or 0 when the heap is empty."""
        if not self._data:
            return 0
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def items(self) -> Tuple[int, ...]:
        """Snapshot of the backing array in heap order (index 0 is the root)."""
        return tuple(self._data)

    def copy(self) -> 'IntHeap':
        clone = IntHeap(self._heap_type)
        clone._data = self._data.copy()
        return clone

    @staticmethod
    def from_array(values: Iterable[int],
                   heap_type: Union[HeapType, str] = HeapType.MIN) -> 'IntHeap':
        """Build a heap from an iterable in O(n).

        Note: Creates a shallow copy of the input.
        """
        heap = IntHeap(heap_type)
        for value in values:
            heap._data.append(_as_int(value))
        for i in range(len(heap._data) // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    def _before(self, a: int, b: int) -> bool:
        # True when a belongs above b
        if self._heap_type is HeapType.MIN:
            return a < b
        return a > b

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._before(self._data[index], self._data[parent]):
                self._data[index], self._data[parent] = self._data[parent], self._data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            top = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self._before(self._data[left], self._data[top]):
                top = left
            if right < size and self._before(self._data[right], self._data[top]):
                top = right
            if top == index:
                break
            self._data[index], self._data[top] = self._data[top], self._data[index]
            index = top

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"IntHeap({self._heap_type.value}, {self._data})"

    def __str__(self) -> str:
        return f"IntHeap({self._heap_type.value}, size={len(self._data)})"

    def __iter__(self) -> Iterator[int]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()


def new_heap_with_type(heap_type: Union[HeapType, str]) -> IntHeap:
    return IntHeap(heap_type)


def new_heap() -> IntHeap:
    return new_heap_with_type(HeapType.MIN)


def new_max_heap() -> IntHeap:
    return new_heap_with_type(HeapType.MAX)
