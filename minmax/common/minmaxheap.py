from dataclasses import dataclass
import math
import operator

@dataclass(frozen=True)
class Entry:
    """A (priority, payload) pair stored in a MinMaxHeap

    Entries are ordered by priority alone but compared for equality on both
    fields, so two entries with the same priority and different payloads are
    neither equal nor ordered relative to each other.

    Attributes:
        priority (int):
            The ordering key
        payload (int):
            The value handed back by peek, pop and iteration
    """
    priority: int
    payload: int

    def __lt__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.priority < other.priority

    def __le__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.priority <= other.priority

    def __gt__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.priority > other.priority

    def __ge__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.priority >= other.priority

    def unwrapped(self):
        """Return the underlying (priority, payload) tuple"""
        return self.priority, self.payload

class MinMaxHeap:
    """Double-ended priority queue of Entries

    Even depths of the implicit tree are min levels and odd depths are max
    levels. The heap has no internal locking; see HeapHandle for a guarded
    front end.
    """
    def __init__(self):
        self.heap = []

    def __len__(self):
        return len(self.heap)

    def __iter__(self):
        return iter(self.iterate())

    def __copy__(self):
        return self.copy()

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, [entry.unwrapped() for entry in self.heap])

    @classmethod
    def from_items(cls, items):
        """Build a heap from Entries or (priority, payload) pairs in O(n)"""
        heap = cls()
        heap.heap = [item if isinstance(item, Entry) else Entry(*item) for item in items]
        first_half = reversed(range(len(heap)//2))
        for i in first_half:
            heap._push_down(i)
        return heap

    def copy(self):
        # Entries are immutable, so sharing them between copies is safe
        heap = type(self)()
        heap.heap = list(self.heap)
        return heap

    def insert(self, priority, payload):
        self.push(Entry(priority, payload))

    def push(self, entry):
        i = len(self)
        self.heap.append(entry)
        self._push_up(i)

    def peek_min(self):
        min_index = self._find_min()
        return None if min_index is None else self.heap[min_index]

    def peek_max(self):
        max_index = self._find_max()
        return None if max_index is None else self.heap[max_index]

    def pop_min(self, count=None):
        """Remove and return the lowest priority Entry, or None if empty

        With a count, pop up to that many entries and return them as a list
        in pop order.
        """
        if count is not None:
            return self._pop_many(self.pop_min, count)
        min_index = self._find_min()
        return None if min_index is None else self._pop(min_index)

    def pop_max(self, count=None):
        """Remove and return the highest priority Entry, or None if empty

        With a count, pop up to that many entries and return them as a list
        in pop order.
        """
        if count is not None:
            return self._pop_many(self.pop_max, count)
        max_index = self._find_max()
        return None if max_index is None else self._pop(max_index)

    def _pop_many(self, pop, count):
        popped = []
        for _ in range(count):
            if not self.heap:
                break
            popped.append(pop())
        return popped

    def size(self):
        return len(self.heap)

    def is_empty(self):
        return not self.heap

    def clear(self):
        self.heap = []

    def iterate(self):
        """Return the payloads in internal array order

        The result is a copy taken now; later pushes, pops or clears do not
        change it.
        """
        return tuple(entry.payload for entry in self.heap)

    def to_ascending(self):
        """Return all payloads by ascending priority, leaving the heap untouched

        The order among entries of equal priority is implementation-defined.
        """
        heap = self.copy()
        return [entry.payload for entry in heap.pop_min(len(heap))]

    def to_descending(self):
        """Return all payloads by descending priority, leaving the heap untouched

        The order among entries of equal priority is implementation-defined.
        """
        heap = self.copy()
        return [entry.payload for entry in heap.pop_max(len(heap))]

    def _pop(self, i):
        item = self.heap[i]
        self.heap[i], self.heap[-1] = self.heap[-1], self.heap[i] # swap
        del self.heap[-1]
        if i < len(self):
            self._push_down(i)
        return item

    def _find_min(self):
        if self.heap:
            return 0
        return None

    def _find_max(self):
        if not self.heap:
            return None
        if len(self) <= 2:
            candidates = range(len(self))
        else:
            candidates = self._get_children(0)
        return max(candidates, key=self._priority)

    def _priority(self, i):
        return self.heap[i].priority

    @staticmethod
    def _is_on_min_level(i):
        level = int(math.floor(math.log2(i+1)))
        return level % 2 == 0

    @staticmethod
    def _is_root(i):
        return i==0

    @staticmethod
    def _is_grandchild_of(i, grandparent):
        return 4*grandparent+3 <= i <= 4*grandparent+6

    @staticmethod
    def _get_parent(i):
        if i == 0:
            return None
        return (i-1)//2

    @staticmethod
    def _has_grandparent(i):
        return i>2

    @staticmethod
    def _get_grandparent(i):
        return ((i-1)//2 - 1)//2

    def _has_children(self, i):
        return len(self) > 2*i+1

    def _get_children(self, i):
        left = 2*i+1
        right = 2*i+2
        children = []
        if len(self) > left:
            children.append(left)
        if len(self) > right:
            children.append(right)
        return children

    def _get_grandchildren(self, i):
        grandchildren = []
        for child in self._get_children(i):
            grandchildren += self._get_children(child)
        return grandchildren

    def _push_down(self, i):
        if self._is_on_min_level(i):
            self._push_down_min(i)
        else:
            self._push_down_max(i)

    def _push_down_min(self, m):
        self._push_down_iter(m, select=min, before=operator.lt)

    def _push_down_max(self, m):
        self._push_down_iter(m, select=max, before=operator.gt)

    def _push_down_iter(self, m, select, before):
        # `before(a, b)` is true when priority a belongs above priority b on
        # this level's role
        heap = self.heap
        while self._has_children(m):
            i = m
            successors = self._get_children(i) + self._get_grandchildren(i)
            m = select(successors, key=self._priority)
            if before(heap[m].priority, heap[i].priority):
                heap[m], heap[i] = heap[i], heap[m] #swap
                if self._is_grandchild_of(m, grandparent=i):
                    p = self._get_parent(m)
                    if before(heap[p].priority, heap[m].priority):
                        heap[m], heap[p] = heap[p], heap[m] #swap
                    continue
            break

    def _push_up(self, i):
        if self._is_root(i):
            return
        heap = self.heap
        p = self._get_parent(i)
        if self._is_on_min_level(i):
            if heap[i].priority > heap[p].priority:
                heap[i], heap[p] = heap[p], heap[i] #swap
                self._push_up_max(p)
            else:
                self._push_up_min(i)
        else:
            if heap[i].priority < heap[p].priority:
                heap[i], heap[p] = heap[p], heap[i] #swap
                self._push_up_min(p)
            else:
                self._push_up_max(i)

    def _push_up_min(self, i):
        self._push_up_iter(i, before=operator.lt)

    def _push_up_max(self, i):
        self._push_up_iter(i, before=operator.gt)

    def _push_up_iter(self, i, before):
        heap = self.heap
        while self._has_grandparent(i):
            gp = self._get_grandparent(i)
            if before(heap[i].priority, heap[gp].priority):
                heap[i], heap[gp] = heap[gp], heap[i] #swap
                i = gp
            else:
                break

    def _is_valid(self):
        """Check the min-max ordering of every node against its whole subtree"""
        for position, entry in enumerate(self.heap):
            on_min_level = self._is_on_min_level(position)
            descendants = self._get_children(position)
            while descendants:
                descendant = descendants.pop()
                priority = self.heap[descendant].priority
                if on_min_level and priority < entry.priority:
                    return False
                if not on_min_level and priority > entry.priority:
                    return False
                descendants += self._get_children(descendant)
        return True
