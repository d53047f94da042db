from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Strategy(Protocol):
    """How row-wise work is executed. Results always come back in input order."""

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]: ...


class SequentialStrategy:
    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]:
        return [fn(item) for item in items]


class ParallelStrategy:
    """Fork-join over a thread pool; the pool is joined before results are returned."""

    def __init__(self, workers: int | None = None):
        self.workers = workers

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]:
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(fn, items))


def get_strategy(parallel: bool, workers: int | None = None) -> Strategy:
    if parallel:
        return ParallelStrategy(workers)
    return SequentialStrategy()
