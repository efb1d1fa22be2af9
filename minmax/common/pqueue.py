import itertools
import numbers
import operator
import threading

from minmax.common.coerce import to_int64
from minmax.common.handle import HeapHandle

def default_priority(item):
    """Return item.priority if the item has one, else the item as a number

    Non-integral reals such as floats are passed through as they are and get
    truncated toward zero when the priority is coerced to int64.
    """
    if hasattr(item, 'priority'):
        return item.priority
    if isinstance(item, numbers.Real) and not isinstance(item, numbers.Integral):
        return item
    return operator.index(item)

class MinMax():
    """Double-ended priority queue of arbitrary hashable objects

    Objects are stored once per distinct value; the heap itself only carries
    integer keys that refer back to them. Equal objects share a key and a
    count of how many copies are queued. Equality is Python equality, so
    values such as 1, 1.0 and True collapse onto whichever was stored first.

    Args:
        *items:
            Initial items
        priority (callable, optional):
            Maps an item to its priority. Defaults to the item's
            ``priority`` attribute, or the item itself when it is a number.
    """
    def __init__(self, *items, priority=None):
        self.priority = default_priority if priority is None else priority
        self.heap = HeapHandle()
        self.keys = {}      # item -> key
        self.storage = {}   # key -> [count, item]
        self._next_key = itertools.count()
        self._lock = threading.RLock()
        self.push(*items)

    def __len__(self):
        return len(self.heap)

    def __contains__(self, item):
        return self.count(item) > 0

    def __iter__(self):
        """Iterate over a snapshot of the queued items, in heap order"""
        return iter(self.to_list())

    def __repr__(self):
        with self._lock:
            head = [repr(self.storage[key][1]) for key in self.heap.snapshot()[:10]]
            more = ', ...' if len(self) > 10 else ''
        return 'MinMax[{}{}]'.format(', '.join(head), more)

    def push(self, *items):
        """Add items to the queue

        Priorities are computed and validated for the whole call before any
        item is stored, so a failing item leaves the queue unchanged.
        """
        priorities = []
        for item in items:
            hash(item) # unhashable items are rejected here, before anything is stored
            priorities.append(to_int64(self.priority(item), 'priority'))
        with self._lock:
            pairs = [(priority, self._store(item)) for priority, item in zip(priorities, items)]
            self.heap.push(pairs)

    add = push

    def pop_min(self, count=None):
        """Remove and return the lowest priority item (or a list of up to count items)"""
        with self._lock:
            return self._retrieve_popped(self.heap.pop_min(count), count)

    def pop_max(self, count=None):
        """Remove and return the highest priority item (or a list of up to count items)"""
        with self._lock:
            return self._retrieve_popped(self.heap.pop_max(count), count)

    def peek_min(self):
        """Return the lowest priority item without removing it"""
        with self._lock:
            return self._retrieve(self.heap.peek_min(), remove=False)

    def peek_max(self):
        """Return the highest priority item without removing it"""
        with self._lock:
            return self._retrieve(self.heap.peek_max(), remove=False)

    def first(self):
        return self.peek_min()

    def last(self):
        return self.peek_max()

    def to_list(self):
        with self._lock:
            return [self.storage[key][1] for key in self.heap.snapshot()]

    def to_ascending(self):
        with self._lock:
            return [self.storage[key][1] for key in self.heap.to_ascending()]

    def to_descending(self):
        with self._lock:
            return [self.storage[key][1] for key in self.heap.to_descending()]

    def count(self, item):
        """Return how many copies of item are queued"""
        with self._lock:
            key = self.keys.get(item)
            return 0 if key is None else self.storage[key][0]

    def size(self):
        return len(self)

    def is_empty(self):
        return self.heap.is_empty()

    def clear(self):
        with self._lock:
            self.heap.clear()
            self.keys.clear()
            self.storage.clear()

    def _store(self, item):
        key = self.keys.get(item)
        if key is None:
            key = next(self._next_key)
            self.keys[item] = key
            self.storage[key] = [0, item]
        self.storage[key][0] += 1
        return key

    def _retrieve(self, key, remove=True):
        if key is None:
            return None
        entry = self.storage[key]
        if remove:
            entry[0] -= 1
            if entry[0] == 0:
                del self.storage[key]
                del self.keys[entry[1]]
        return entry[1]

    def _retrieve_popped(self, popped, count):
        if count is None:
            return self._retrieve(popped)
        return [self._retrieve(key) for key in popped]
