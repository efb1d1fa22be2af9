import copy
import logging
import threading

from minmax.common.coerce import CoercionError, coerce_pairs, to_int64
from minmax.common.minmaxheap import MinMaxHeap

logger = logging.getLogger(__name__)

def _unbox(popped):
    if popped is None:
        return None
    if isinstance(popped, list):
        return [entry.payload for entry in popped]
    return popped.payload

class HeapHandle:
    """Integer front end to a MinMaxHeap

    The handle validates input at the boundary, hands back bare payloads
    instead of Entries, and serializes every call through a re-entrant lock,
    so one handle may be shared between threads. Handles made with alias()
    refer to the same heap and the same lock.
    """
    def __init__(self):
        self._heap = MinMaxHeap()
        self._lock = threading.RLock()

    def __len__(self):
        return self.size()

    def __iter__(self):
        return iter(self.snapshot())

    def __repr__(self):
        return '{}(size={})'.format(type(self).__name__, len(self))

    def alias(self):
        """Return another handle to this same heap"""
        return copy.copy(self)

    def push(self, pairs):
        """Insert a batch of (priority, payload) pairs

        The whole batch is validated before anything is inserted; on error
        the heap is left as it was.

        Args:
            pairs (iterable or np.ndarray):
                Pairs of numbers, or an integer or float array of shape (n, 2)
        """
        try:
            entries = coerce_pairs(pairs)
        except CoercionError as err:
            logger.debug('Rejected batch: %s', err)
            raise
        with self._lock:
            for priority, payload in entries:
                self._heap.insert(priority, payload)

    def peek_min(self):
        with self._lock:
            return _unbox(self._heap.peek_min())

    def peek_max(self):
        with self._lock:
            return _unbox(self._heap.peek_max())

    def pop_min(self, count=None):
        """Remove the lowest priority payload, or a list of up to count of them"""
        if count is not None:
            count = to_int64(count, 'count')
        with self._lock:
            return _unbox(self._heap.pop_min(count))

    def pop_max(self, count=None):
        """Remove the highest priority payload, or a list of up to count of them"""
        if count is not None:
            count = to_int64(count, 'count')
        with self._lock:
            return _unbox(self._heap.pop_max(count))

    def snapshot(self):
        with self._lock:
            return self._heap.iterate()

    def to_ascending(self):
        with self._lock:
            return self._heap.to_ascending()

    def to_descending(self):
        with self._lock:
            return self._heap.to_descending()

    def size(self):
        with self._lock:
            return self._heap.size()

    def is_empty(self):
        with self._lock:
            return self._heap.is_empty()

    def clear(self):
        with self._lock:
            logger.debug('Clearing %d entries', self._heap.size())
            self._heap.clear()
