#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
import time
import tracemalloc
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from turkish_dama.core import Side, initial_board
from turkish_dama.engine import Engine
from turkish_dama.perft import perft


def run_perft(depth: int, repeat: int) -> dict[str, float | int]:
    board = initial_board()
    total_nodes = 0
    start = time.perf_counter()
    tracemalloc.start()
    for _ in range(repeat):
        total_nodes += perft(board, Side.NEAR, depth)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    elapsed = time.perf_counter() - start
    return {
        "depth": depth,
        "repeat": repeat,
        "total_nodes": total_nodes,
        "seconds": elapsed,
        "nodes_per_sec": 0.0 if elapsed <= 0 else total_nodes / elapsed,
        "peak_alloc_bytes": peak,
    }


def run_search(depth: int, repeat: int, node_limit: int) -> dict[str, float | int]:
    board = initial_board()
    engine = Engine(node_limit=node_limit)
    start = time.perf_counter()
    tracemalloc.start()
    found = 0
    nodes = 0
    for _ in range(repeat):
        result = engine.search(board, Side.NEAR, depth)
        nodes += result.nodes
        if result.move is not None:
            found += 1
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    elapsed = time.perf_counter() - start
    return {
        "depth": depth,
        "repeat": repeat,
        "best_moves_found": found,
        "nodes": nodes,
        "seconds": elapsed,
        "searches_per_sec": 0.0 if elapsed <= 0 else repeat / elapsed,
        "peak_alloc_bytes": peak,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark perft and engine search hot paths")
    parser.add_argument("--perft-depth", type=int, default=4)
    parser.add_argument("--perft-repeat", type=int, default=2)
    parser.add_argument("--search-depth", type=int, default=4)
    parser.add_argument("--search-repeat", type=int, default=3)
    parser.add_argument("--node-limit", type=int, default=2_000_000)
    args = parser.parse_args()

    results = {
        "perft": run_perft(depth=args.perft_depth, repeat=args.perft_repeat),
        "search": run_search(depth=args.search_depth, repeat=args.search_repeat, node_limit=args.node_limit),
    }
    print(json.dumps(results, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
