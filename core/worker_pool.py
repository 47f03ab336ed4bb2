"""
Worker Pool - Bounded parallel execution with first-error-wins semantics.

Used by the table exporter and the asset synchronizer when MAX_WORKERS > 1.
With one worker, items run in order on the calling thread, which is the
default behaviour.
"""

from concurrent.futures import ThreadPoolExecutor, FIRST_EXCEPTION, wait
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def run_bounded(items: Iterable[T], func: Callable[[T], R], max_workers: int = 1) -> List[R]:
    """Apply func to every item, at most max_workers at a time.

    Results are returned in item order. Once any call fails, items not yet
    started are cancelled and running work is allowed to finish. The error
    of the earliest failed item (in item order) is then re-raised, the same
    one the sequential path would have stopped at.
    """
    items = list(items)
    if max_workers <= 1 or len(items) <= 1:
        return [func(item) for item in items]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(func, item) for item in items]
        _, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in pending:
            future.cancel()
        wait(futures)

    for future in futures:
        if not future.cancelled() and future.exception() is not None:
            raise future.exception()
    return [future.result() for future in futures]
