"""Choice, reservoir sampling and Fisher-Yates shuffling.

All index draws go through ``gen.next_ulong`` so every family yields unbiased
picks. The ``*_async`` variants run the same work on a worker thread and
honour a cancellation token (a ``threading.Event``) checked before starting;
the algorithms themselves are not interruptible.
"""

from __future__ import annotations

import asyncio
import itertools
import threading
from collections.abc import Sequence
from typing import Any, Iterable, List, MutableSequence, Optional


def _as_sequence(items) -> Sequence:
    if items is None:
        raise ValueError("items can't be None")
    pool = items if isinstance(items, Sequence) else list(items)
    if len(pool) == 0:
        raise ValueError("items can't be empty")
    return pool


def choice(gen, items, select: Optional[int] = None, replace: bool = True):
    """
    One item when `select` is None, otherwise a list of `select` items:
    independent picks with replacement, or distinct positions without.
    """
    pool = _as_sequence(items)
    n = len(pool)
    if select is None:
        return pool[gen.next_ulong(0, n)]

    if select < 0:
        raise ValueError("select must be non-negative")
    if replace:
        return [pool[gen.next_ulong(0, n)] for _ in range(select)]

    if select > n:
        raise ValueError("select exceeds the number of items")
    # partial Fisher-Yates from the front
    work = list(pool)
    for i in range(select):
        j = gen.next_ulong(i, n)
        work[i], work[j] = work[j], work[i]
    return work[:select]


def sample(gen, items: Iterable, select: int) -> List:
    """
    `select` distinct items by single-pass reservoir sampling. Works on any
    iterable; when it holds no more than `select` items all of them are
    returned.
    """
    if items is None:
        raise ValueError("items can't be None")
    if select <= 0:
        raise ValueError("select must be positive")
    if isinstance(items, Sequence):
        if len(items) == 0:
            raise ValueError("items can't be empty")
        if select >= len(items):
            return list(items)

    it = iter(items)
    reservoir = list(itertools.islice(it, select))
    if not reservoir:
        raise ValueError("items can't be empty")
    for i, item in enumerate(it, start=select):
        j = gen.next_ulong(0, i + 1)
        if j < select:
            reservoir[j] = item
    return reservoir


def shuffle_in_place(gen, items: MutableSequence) -> None:
    """Fisher-Yates over indices n-1 .. 1, partner drawn from [0, i]."""
    if items is None:
        raise ValueError("items can't be None")
    for i in range(len(items) - 1, 0, -1):
        j = gen.next_ulong(0, i + 1)
        items[i], items[j] = items[j], items[i]


def shuffle(gen, items: Iterable) -> List:
    if items is None:
        raise ValueError("items can't be None")
    out = list(items)
    shuffle_in_place(gen, out)
    return out


# ─────────────────────────────────────────────────────────────────────────────
#  Async wrappers
# ─────────────────────────────────────────────────────────────────────────────
async def _off_thread(cancel: Optional[threading.Event], fn, *args) -> Any:
    if cancel is not None and cancel.is_set():
        raise asyncio.CancelledError()
    return await asyncio.to_thread(fn, *args)


async def choice_async(gen, items, select=None, replace=True, cancel=None):
    return await _off_thread(cancel, choice, gen, items, select, replace)


async def sample_async(gen, items, select, cancel=None):
    return await _off_thread(cancel, sample, gen, items, select)


async def shuffle_async(gen, items, cancel=None):
    return await _off_thread(cancel, shuffle, gen, items)


async def shuffle_in_place_async(gen, items, cancel=None):
    return await _off_thread(cancel, shuffle_in_place, gen, items)
