import logging
from typing import Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EmptyStackError(IndexError):
    def __init__(self, message: str = "Stack is empty"):
        super().__init__(message)


class Stack(Generic[T]):
    """
    Last-in-first-out container.

    pop() and peek() raise EmptyStackError on an empty stack instead of
    returning a placeholder value.
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            logger.debug("pop() on empty stack")
            raise EmptyStackError()
        return self._items.pop()

    def peek(self) -> T:
        if self.is_empty():
            logger.debug("peek() on empty stack")
            raise EmptyStackError()
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
