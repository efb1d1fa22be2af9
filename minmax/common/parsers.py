import argparse

benchmark_parser = argparse.ArgumentParser(
    description='Time HeapHandle push/pop against a heapq baseline'
)
benchmark_parser.add_argument('--n-items', type=int, default=100_000,
                              help='Number of (priority, payload) pairs per trial')
benchmark_parser.add_argument('--batch-size', type=int, default=1000,
                              help='Pairs per call for the batched push and pop runs')
benchmark_parser.add_argument('--trials', type=int, default=3,
                              help='Number of repetitions of each operation')
benchmark_parser.add_argument('--seed', type=int, default=0,
                              help='Random seed for the generated priorities')
benchmark_parser.add_argument('--results-dir', type=str, default='results',
                              help='Where to save the benchmark plot')
benchmark_parser.add_argument('--no-plot', action='store_true',
                              help='Skip saving the benchmark plot')
