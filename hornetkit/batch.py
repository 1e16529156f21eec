"""Random generation of edge batches for inserting into or removing from a graph."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Sequence
from typing import TextIO

from hornetkit.properties import (
    PRINT,
    UNIQUE,
    WEIGHTED,
    BatchGenProperty,
    BatchGenType,
)


def _removal_batch(
    adjacency: Sequence[Sequence[int]], batch_size: int, rng: random.Random
) -> list[tuple[int, int]]:
    if batch_size > 0 and not any(adjacency):
        raise ValueError("cannot pick edges to remove from a graph with no edges")
    num_vertices = len(adjacency)
    batch: list[tuple[int, int]] = []
    while len(batch) < batch_size:
        src = rng.randint(0, num_vertices - 1)
        neighbors = adjacency[src]
        if not neighbors:
            continue
        index = rng.randint(0, len(neighbors) - 1)
        batch.append((src, neighbors[index]))
    return batch


def _weighted_batch(
    adjacency: Sequence[Sequence[int]], batch_size: int, rng: random.Random
) -> list[tuple[int, int]]:
    degrees = [len(neighbors) for neighbors in adjacency]
    if batch_size > 0 and sum(degrees) == 0:
        raise ValueError("weighted generation needs at least one edge")
    vertices = range(len(adjacency))
    batch = []
    for _ in range(batch_size):
        src, dst = rng.choices(vertices, weights=degrees, k=2)
        batch.append((src, dst))
    return batch


def _uniform_batch(
    num_vertices: int, batch_size: int, rng: random.Random
) -> list[tuple[int, int]]:
    return [
        (rng.randint(0, num_vertices - 1), rng.randint(0, num_vertices - 1))
        for _ in range(batch_size)
    ]


def generate_batch(
    adjacency: Sequence[Sequence[int]],
    batch_size: int,
    batch_type: BatchGenType = BatchGenType.INSERT,
    prop: BatchGenProperty | None = None,
    seed: int | None = None,
    file: TextIO | None = None,
) -> list[tuple[int, int]]:
    """Return a batch of ``(source, destination)`` edges for a graph.

    ``adjacency[v]`` lists the out-neighbours of vertex ``v``. A removal
    batch holds existing edges. An insertion batch holds random vertex
    pairs, drawn in proportion to out-degree when ``prop`` is
    :data:`WEIGHTED`. With :data:`UNIQUE` the batch is sorted and
    duplicates dropped, so it may come back shorter. With :data:`PRINT`
    the batch is written, sorted, to ``file`` (standard output by default).
    Without a ``seed`` the generator is seeded from the current time.
    """
    if batch_size < 0:
        raise ValueError("batch_size must be non-negative")
    if not adjacency:
        raise ValueError("the graph has no vertices")
    prop = BatchGenProperty() if prop is None else prop
    rng = random.Random(time.time_ns() if seed is None else seed)

    if batch_type is BatchGenType.REMOVE:
        batch = _removal_batch(adjacency, batch_size, rng)
    elif prop == WEIGHTED:
        batch = _weighted_batch(adjacency, batch_size, rng)
    else:
        batch = _uniform_batch(len(adjacency), batch_size, rng)

    if prop == UNIQUE:
        batch = sorted(set(batch))
    elif prop == PRINT:
        out = file or sys.stdout
        lines = "".join(f"({src},{dst})\n" for src, dst in sorted(batch))
        print(f"Batch:\n{lines}", file=out)
    return batch