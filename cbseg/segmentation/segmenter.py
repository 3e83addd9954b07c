"""
Circular Binary Segmentation of a numeric sequence into contiguous segments whose means differ significantly, built by repeatedly testing and splitting shrinking index ranges of the input.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from cbseg.exceptions import InvalidParameterError
from cbseg.segmentation.detector import detect

log = logging.getLogger(__name__)

_RANGE = 0
_EMIT = 1


@dataclass(frozen=True)
class Segment:
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def as_tuple(self) -> Tuple[int, int]:
        return self.start, self.end


def as_series(x: Iterable[float]) -> np.ndarray:
    arr = np.asarray(x, dtype=float)
    if arr.ndim != 1:
        raise InvalidParameterError(f"expected a one-dimensional sequence, got shape {arr.shape}")
    return arr


def _validate(shuffles: int, p: float) -> None:
    if isinstance(shuffles, bool) or not isinstance(shuffles, (int, np.integer)) or shuffles < 1:
        raise InvalidParameterError(f"shuffles must be a positive integer, got {shuffles!r}")
    try:
        level = float(p)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"significance level must be a number, got {p!r}") from None
    if not 0.0 < level < 1.0:
        raise InvalidParameterError(f"significance level must lie in (0, 1), got {p!r}")


def segment(
    x: Iterable[float],
    shuffles: int,
    p: float,
    rng: np.random.Generator,
) -> List[Segment]:
    """Segment ``x`` using the caller's random generator.

    Ranges are processed depth first, left to right, off an explicit stack so
    that segments are emitted, and ``rng`` consumed, in the same order a plain
    recursive descent would produce.
    """
    from config import settings

    arr = as_series(x)
    _validate(shuffles, p)
    min_split = settings.cbs_min_split_length
    edge_margin = settings.cbs_edge_margin

    segments: List[Segment] = []
    stack: List[Tuple[int, int, int]] = [(_RANGE, 0, len(arr))]

    while stack:
        kind, start, end = stack.pop()
        if kind == _EMIT:
            segments.append(Segment(start, end))
            continue
        if start >= end:
            continue

        result = detect(arr[start:end], shuffles, p, rng, edge_margin=edge_margin)
        s, e = result.start, result.end

        if not result.is_significant or e - s < min_split or e - s == end - start:
            segments.append(Segment(start, end))
            continue

        log.debug("splitting [%d, %d) at [%d, %d) (t=%.4f)", start, end, start + s, start + e, result.statistic)

        # pushed in reverse so the left part is fully resolved first
        if start + e < end:
            stack.append((_RANGE, start + e, end))
        if e - s > 0:
            stack.append((_EMIT, start + s, start + e))
        if s > 0:
            stack.append((_RANGE, start, start + s))

    return segments


def cbs(
    x: Iterable[float],
    shuffles: Optional[int] = None,
    p: Optional[float] = None,
    seed: Optional[int] = None,
) -> List[Segment]:
    """Split ``x`` into segments of significantly different mean.

    Any integer ``seed`` (zero included) makes the result reproducible; with no
    seed given here or in settings, the generator is seeded from OS entropy.
    """
    from config import settings
    if shuffles is None:
        shuffles = settings.cbs_shuffles
    if p is None:
        p = settings.cbs_significance
    if seed is None:
        seed = settings.cbs_seed

    rng = np.random.default_rng(seed)
    segments = segment(x, shuffles, p, rng)
    log.info("cbs: %d segment(s) over %d values", len(segments), sum(s.length for s in segments))
    return segments
