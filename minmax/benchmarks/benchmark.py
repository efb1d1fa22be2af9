import heapq
import os
import time

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from tqdm import tqdm

from minmax.common.handle import HeapHandle
from minmax.common.parsers import benchmark_parser

class CPUTimer:
    def __enter__(self):
        self.start = time.perf_counter()
        self.end = self.start
        self.duration = 0.0
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.end = time.perf_counter()
            self.duration = self.end - self.start

def make_pairs(n_items, rng):
    """Random priorities paired with their index as payload, shape (n_items, 2)"""
    priorities = rng.integers(0, 1_000_000_000, size=n_items, dtype=np.int64)
    return np.column_stack((priorities, np.arange(n_items, dtype=np.int64)))

def push_heapq(pairs, batch_size):
    heap = []
    for priority, payload in pairs.tolist():
        heapq.heappush(heap, (priority, payload))
    return heap

def push_handle(pairs, batch_size):
    handle = HeapHandle()
    for pair in pairs.tolist():
        handle.push([pair])
    return handle

def push_handle_batches(pairs, batch_size):
    handle = HeapHandle()
    for start in range(0, len(pairs), batch_size):
        handle.push(pairs[start:start+batch_size])
    return handle

def pop_heapq(heap, n_items, batch_size):
    for _ in range(n_items):
        heapq.heappop(heap)

def pop_handle(handle, n_items, batch_size):
    for _ in range(n_items):
        handle.pop_min()

def pop_handle_batches(handle, n_items, batch_size):
    for _ in range(0, n_items, batch_size):
        handle.pop_min(batch_size)

# (implementation, push, pop); the pop run drains whatever its push run built
RUNS = [
    ('heapq', push_heapq, pop_heapq),
    ('handle', push_handle, pop_handle),
    ('handle_batches', push_handle_batches, pop_handle_batches),
]

def run_benchmarks(n_items, batch_size, trials, seed=0):
    """Time every run in RUNS and return one row per (trial, implementation, operation)"""
    rng = np.random.default_rng(seed)
    rows = []
    with tqdm(total=trials*len(RUNS)) as pbar:
        for trial in range(trials):
            pairs = make_pairs(n_items, rng)
            for name, push, pop in RUNS:
                with CPUTimer() as t:
                    heap = push(pairs, batch_size)
                rows.append({'trial': trial, 'implementation': name, 'operation': 'push',
                             'seconds': t.duration})
                with CPUTimer() as t:
                    pop(heap, n_items, batch_size)
                rows.append({'trial': trial, 'implementation': name, 'operation': 'pop_min',
                             'seconds': t.duration})
                pbar.set_description('trial={}, run={}'.format(trial, name))
                pbar.update(1)
    return pd.DataFrame(rows)

def plot_results(data, results_dir):
    os.makedirs(results_dir, exist_ok=True)
    with sns.plotting_context('notebook', font_scale=1.5):
        sns.barplot(data=data, x='operation', y='seconds', hue='implementation')
        plt.title('push / pop_min')
        plt.tight_layout()
        plt.savefig(os.path.join(results_dir, 'benchmark.png'))
        plt.close()

def main():
    args = benchmark_parser.parse_args()
    data = run_benchmarks(args.n_items, args.batch_size, args.trials, seed=args.seed)
    summary = data.groupby(['operation', 'implementation'])['seconds'].agg(['mean', 'std'])
    print(summary)
    if not args.no_plot:
        plot_results(data, args.results_dir)
        print('Plot saved to {}'.format(os.path.join(args.results_dir, 'benchmark.png')))

if __name__ == "__main__":
    main()
