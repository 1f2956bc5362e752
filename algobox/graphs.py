"""Shortest paths with Bellman-Ford and deadlock avoidance with the banker's algorithm."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = ["bellman_ford", "safe_sequence", "UnsafeStateError"]


class UnsafeStateError(Exception):
    """Raised when no order lets every process finish.

    ``completed`` holds the processes that could finish, in order.
    """

    def __init__(self, completed: list[int]) -> None:
        super().__init__(f"state is unsafe; only {completed} can finish")
        self.completed = completed


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], source: int
) -> list[float]:
    """Shortest distances from ``source`` over directed weighted ``edges``.

    Edges are ``(u, v, weight)`` triples; unreachable vertices get ``math.inf``.
    Exactly ``vertex_count - 1`` relaxation rounds are run, so negative cycles
    are not detected.
    """
    edge_list = list(edges)
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} is not a vertex")
    for u, v, _ in edge_list:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a missing vertex")
    distance: list[float] = [math.inf] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edge_list:
            distance[v] = min(distance[v], distance[u] + weight)
    return distance


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int]:
    """Return an order in which every process can run to completion.

    Processes are scanned repeatedly in index order; each one whose remaining
    need fits in the available resources finishes and releases its allocation.
    Raises UnsafeStateError when some process can never finish.
    """
    resource_count = len(available)
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must list the same processes")
    need: list[list[int]] = []
    for held, limit in zip(allocation, maximum):
        if len(held) != resource_count or len(limit) != resource_count:
            raise ValueError("every process must list each resource type")
        row = [top - used for top, used in zip(limit, held)]
        if any(amount < 0 for amount in row):
            raise ValueError("a process holds more than its declared maximum")
        need.append(row)

    work = list(available)
    finished = [False] * len(allocation)
    order: list[int] = []
    progress = True
    while progress:
        progress = False
        for process, row in enumerate(need):
            if finished[process]:
                continue
            if all(amount <= free for amount, free in zip(row, work)):
                work = [free + held for free, held in zip(work, allocation[process])]
                finished[process] = True
                order.append(process)
                progress = True
    if not all(finished):
        raise UnsafeStateError(order)
    return order