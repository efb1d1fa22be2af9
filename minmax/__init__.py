from minmax.common.coerce import CoercionError, Int64RangeError, MinMaxError
from minmax.common.handle import HeapHandle
from minmax.common.minmaxheap import Entry, MinMaxHeap
from minmax.common.pqueue import MinMax

__version__ = '0.1.0'

__all__ = [
    'CoercionError',
    'Entry',
    'HeapHandle',
    'Int64RangeError',
    'MinMax',
    'MinMaxError',
    'MinMaxHeap',
]
