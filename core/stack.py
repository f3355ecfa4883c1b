"""core/stack.py - 带容量上限的栈"""
from core.errors import CalcCapacityError


class BoundedStack:
    """按需增长的栈，超过 capacity 时抛出 CalcCapacityError"""

    def __init__(self, capacity, overflow_message):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.overflow_message = overflow_message
        self._items = []

    def push(self, item):
        if len(self._items) >= self.capacity:
            raise CalcCapacityError(self.overflow_message)
        self._items.append(item)

    def pop(self):
        return self._items.pop()

    def peek(self):
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self):
        # 从栈底到栈顶
        return iter(self._items)

    def __repr__(self):
        return f"BoundedStack({self._items!r}, capacity={self.capacity})"
