import copy

import numpy as np

from minmax.common.minmaxheap import Entry, MinMaxHeap

SCENARIO = [(5, 100), (2, 200), (8, 300), (1, 400), (9, 500)]

def build(pairs):
    heap = MinMaxHeap()
    for priority, payload in pairs:
        heap.insert(priority, payload)
    return heap

def test_push_and_from_items():
    heap_a = MinMaxHeap()
    for i in range(7):
        heap_a.insert(i, i)
        assert heap_a._is_valid()

    heap_b = MinMaxHeap.from_items((i, i) for i in range(7))
    assert heap_b._is_valid()
    assert len(heap_b) == len(heap_a)

    # Test pop_min
    heap_c = copy.copy(heap_a)
    heap_d = copy.copy(heap_b)
    while heap_b:
        assert heap_a.peek_min() == heap_b.peek_min()
        assert heap_a.peek_max() == heap_b.peek_max()
        assert heap_a.pop_min() == heap_b.pop_min()
        assert heap_a._is_valid() and heap_b._is_valid()

    # Test pop_max
    while heap_d:
        assert heap_c.peek_max() == heap_d.peek_max()
        assert heap_c.pop_max() == heap_d.pop_max()
        assert heap_c._is_valid() and heap_d._is_valid()

def test_from_items_accepts_entries():
    heap = MinMaxHeap.from_items([Entry(3, 30), Entry(1, 10), (2, 20)])
    assert heap._is_valid()
    assert heap.to_ascending() == [10, 20, 30]

def test_scenario():
    heap = build(SCENARIO)
    assert heap.peek_min().payload == 400
    assert heap.peek_max().payload == 500
    assert heap.pop_min().payload == 400
    assert heap.size() == 4
    assert [entry.payload for entry in heap.pop_max(2)] == [500, 300]
    assert heap.size() == 2
    assert sorted(entry.priority for entry in heap.heap) == [2, 5]
    assert heap.to_ascending() == [200, 100]
    assert heap.to_descending() == [100, 200]
    heap.clear()
    assert heap.is_empty()

def test_empty_heap_returns_none():
    heap = MinMaxHeap()
    for _ in range(3):
        assert heap.peek_min() is None
        assert heap.peek_max() is None
        assert heap.pop_min() is None
        assert heap.pop_max() is None
        assert heap.pop_min(5) == []
        assert heap.pop_max(5) == []
    assert heap.size() == 0
    assert heap.is_empty()
    assert heap.to_ascending() == []
    assert heap.iterate() == ()

def test_peek_max_small_heaps():
    heap = build([(4, 1)])
    assert heap.peek_max().payload == 1
    heap.insert(7, 2)
    assert heap.peek_max().payload == 2
    heap.insert(3, 3)
    assert heap.peek_max().payload == 2
    assert heap.pop_max().payload == 2
    assert heap.pop_max().payload == 1
    assert heap.pop_max().payload == 3
    assert heap.pop_max() is None

def test_counted_pops():
    heap = build((i, i) for i in range(10))
    assert heap.pop_min(0) == []
    assert heap.pop_max(-3) == []
    assert len(heap) == 10
    assert [e.payload for e in heap.pop_min(3)] == [0, 1, 2]
    assert [e.payload for e in heap.pop_max(3)] == [9, 8, 7]
    assert len(heap) == 4
    # asking for more than is left stops early
    assert [e.payload for e in heap.pop_min(100)] == [3, 4, 5, 6]
    assert heap.is_empty()

def test_snapshot_is_not_affected_by_mutation():
    heap = build(SCENARIO)
    snapshot = heap.iterate()
    assert sorted(snapshot) == [100, 200, 300, 400, 500]

    consumed = []
    for payload in snapshot:
        consumed.append(payload)
        heap.pop_max()
        heap.insert(0, -1)
    assert consumed == list(snapshot)
    assert len(snapshot) == 5

    heap.clear()
    assert list(snapshot) == consumed

def test_iter_follows_array_order():
    heap = build(SCENARIO)
    assert list(heap) == [entry.payload for entry in heap.heap]
    assert list(heap) == list(heap)

def test_sorted_extraction_is_non_destructive():
    heap = build(SCENARIO)
    before = list(heap.heap)
    assert heap.to_ascending() == [400, 200, 100, 300, 500]
    assert heap.to_descending() == [500, 300, 100, 200, 400]
    assert heap.heap == before

def test_equal_priorities():
    heap = MinMaxHeap()
    heap.insert(2, -1)
    for i in range(20):
        heap.insert(1, i)
    heap.insert(0, -2)
    assert heap._is_valid()
    assert heap.pop_max().payload == -1
    assert heap.pop_min().payload == -2
    assert len(heap) == 20
    assert sorted(heap.to_ascending()) == list(range(20))

def test_entry_ordering_and_equality():
    a = Entry(1, 10)
    b = Entry(1, 20)
    c = Entry(2, 10)
    assert a != b
    assert not a < b and not b < a
    assert a <= b and a >= b
    assert a < c and c > a
    assert a == Entry(1, 10)
    assert hash(a) == hash(Entry(1, 10))
    assert a.unwrapped() == (1, 10)

def test_repr_shows_pairs_in_array_order():
    assert repr(MinMaxHeap()) == 'MinMaxHeap([])'
    heap = build(SCENARIO)
    assert repr(heap) == 'MinMaxHeap([(1, 400), (9, 500), (8, 300), (2, 200), (5, 100)])'

def test_extreme_priorities():
    lo, hi = np.iinfo(np.int64).min, np.iinfo(np.int64).max
    heap = build([(0, 0), (hi, 1), (lo, 2), (hi, 3), (lo, 4)])
    assert heap._is_valid()
    assert heap.peek_min().priority == lo
    assert heap.peek_max().priority == hi

def test_random_operations_keep_invariants():
    rng = np.random.default_rng(0)
    heap = MinMaxHeap()
    reference = []
    for step in range(2000):
        op = rng.integers(0, 4)
        if op <= 1:
            priority, payload = (int(x) for x in rng.integers(-50, 50, size=2))
            heap.insert(priority, payload)
            reference.append(priority)
        elif op == 2:
            entry = heap.pop_min()
            if reference:
                assert entry.priority == min(reference)
                reference.remove(entry.priority)
            else:
                assert entry is None
        else:
            entry = heap.pop_max()
            if reference:
                assert entry.priority == max(reference)
                reference.remove(entry.priority)
            else:
                assert entry is None
        assert len(heap) == len(reference)
        if step % 100 == 0:
            assert heap._is_valid()
            priorities = [entry.priority for entry in heap.heap]
            if priorities:
                assert heap.peek_min().priority == min(priorities)
                assert heap.peek_max().priority == max(priorities)

def test_sorted_round_trip_random():
    rng = np.random.default_rng(1)
    pairs = rng.integers(-1000, 1000, size=(500, 2)).tolist()
    heap = MinMaxHeap.from_items(pairs)
    assert heap._is_valid()

    ascending = heap.to_ascending()
    descending = heap.to_descending()
    assert len(ascending) == len(descending) == len(heap) == 500
    assert sorted(ascending) == sorted(payload for _, payload in pairs)

    # re-derive priorities by popping a copy so duplicated payloads line up
    asc_priorities = [entry.priority for entry in heap.copy().pop_min(500)]
    desc_priorities = [entry.priority for entry in heap.copy().pop_max(500)]
    assert asc_priorities == sorted(priority for priority, _ in pairs)
    assert desc_priorities == asc_priorities[::-1]
    assert len(heap) == 500
