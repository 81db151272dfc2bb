"""Non-overlapping streams for concurrent use.

Engines are not thread-safe, so concurrency means one engine per worker. The
streams here are carved from one engine with its family jump, so workers
never share or overlap state.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, List, Optional

from .engine import Engine
from .generator import Generator

log = logging.getLogger(__name__)


def split_streams(engine: Engine, count: int) -> List[Engine]:
    """
    `count` independent engines: the first is a copy of `engine`, each next
    one is the previous advanced by the family's stream jump. `engine` itself
    is left untouched.
    """
    if count <= 0:
        raise ValueError("count must be positive")
    streams = [engine.copy()]
    for _ in range(count - 1):
        nxt = streams[-1].copy()
        nxt.jump_stream()
        streams.append(nxt)
    log.debug("split %s into %d streams", engine.name, count)
    return streams


def run_streams(fn: Callable[[Generator], Any], engine: Engine, count: int,
                max_workers: Optional[int] = None) -> List[Any]:
    """Run fn(Generator) once per stream on a thread pool; results in stream order."""
    streams = split_streams(engine, count)
    results: List[Any] = [None] * count
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        futs = {ex.submit(fn, Generator(e)): i for i, e in enumerate(streams)}
        for fut in as_completed(futs):
            i = futs[fut]
            results[i] = fut.result()
            log.debug("[pool] stream=%03d done", i)
    return results
