from typing import TypeVar, Generic, Iterable, Iterator, List, Optional

T = TypeVar('T')

INITIAL_CAPACITY = 10


class EmptyHeapError(IndexError):
    pass


class HeapInvariantError(AssertionError):
    pass


class MaxHeap(Generic[T]):
    """Binary max-heap over a fixed-capacity list that doubles when full.

    The first ``size`` slots hold the elements; every element is <= its
    parent at ``(i - 1) // 2``, so the maximum sits at index 0.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY, check_invariants: bool = False) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0
        self._check_invariants = check_invariants

    @staticmethod
    def from_array(values: Iterable[T], check_invariants: bool = False) -> 'MaxHeap[T]':
        """Build a heap from an iterable in linear time.

        Note: Copies the input; the caller's sequence is left untouched.
        """
        items = list(values)
        heap: MaxHeap[T] = MaxHeap(max(INITIAL_CAPACITY, len(items)), check_invariants)
        heap._data[:len(items)] = items
        heap._size = len(items)
        for i in range(heap._size // 2 - 1, -1, -1):
            heap._sift_down(i)
        heap._verify("from_array")
        return heap

    def is_empty(self) -> bool:
        return self._size == 0

    def peek_max(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("peek_max from empty heap")
        return self._data[0]

    def insert(self, value: T) -> None:
        self._verify("insert")
        if self._size == len(self._data):
            self._grow()
        self._data[self._size] = value
        self._size += 1
        self._sift_up(self._size - 1)
        self._verify("insert")

    def delete_max(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("delete_max from empty heap")
        self._verify("delete_max")
        result = self._data[0]
        self._size -= 1
        if self._size > 0:
            self._data[0] = self._data[self._size]
            self._data[self._size] = None
            self._sift_down(0)
        else:
            self._data[0] = None
        self._verify("delete_max")
        return result

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def copy(self) -> 'MaxHeap[T]':
        clone: MaxHeap[T] = MaxHeap(0, self._check_invariants)
        clone._data = self._data.copy()
        clone._size = self._size
        return clone

    def to_list(self) -> List[T]:
        return self._data[:self._size]

    def is_heap(self) -> bool:
        return self._first_violation() is None

    def _first_violation(self) -> Optional[int]:
        # 'not <=' rather than '>' so NaN counts as a violation
        for i in range(1, self._size):
            if not self._data[i] <= self._data[(i - 1) // 2]:
                return i
        return None

    def _verify(self, operation: str) -> None:
        if not self._check_invariants:
            return
        index = self._first_violation()
        if index is not None:
            raise HeapInvariantError(
                f"MaxHeap.{operation}: heap order violated at index {index} "
                f"(parent {(index - 1) // 2})"
            )

    def _grow(self) -> None:
        new_capacity = INITIAL_CAPACITY if len(self._data) == 0 else 2 * len(self._data)
        new_data: List[Optional[T]] = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        # only index may be larger than its parent
        while index > 0:
            parent = (index - 1) // 2
            if self._data[index] > self._data[parent]:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        # only index may be smaller than one of its children
        while True:
            left = 2 * index + 1
            if left >= self._size:
                break
            right = left + 1
            child = left
            if right < self._size and self._data[right] > self._data[left]:
                child = right
            if self._data[index] >= self._data[child]:
                break
            self._swap(index, child)
            index = child

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"MaxHeap({self.to_list()})"

    def __str__(self) -> str:
        return f"MaxHeap(size={self._size}, capacity={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        heap_copy._check_invariants = False
        while not heap_copy.is_empty():
            yield heap_copy.delete_max()
