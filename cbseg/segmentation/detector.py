"""
Permutation test deciding whether the candidate split of a sub-sequence is a real mean shift, with edge snapping of near-boundary splits and early exit once the significance level can no longer be met.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from cbseg.segmentation.statistic import cbs_stat

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeTest:
    is_significant: bool
    statistic: float
    start: int
    end: int


def _snap_to_edges(start: int, end: int, length: int, margin: int) -> tuple[int, int]:
    if start < margin:
        start = 0
    if length - end < margin:
        end = length
    return start, end


def detect(
    x: np.ndarray,
    shuffles: int,
    p: float,
    rng: np.random.Generator,
    edge_margin: int | None = None,
) -> ChangeTest:
    from config import settings
    if edge_margin is None:
        edge_margin = settings.cbs_edge_margin

    arr = np.asarray(x, dtype=float)
    n = len(arr)
    candidate = cbs_stat(arr)
    max_t = candidate.statistic

    if candidate.end - candidate.start == n:
        return ChangeTest(False, max_t, candidate.start, candidate.end)

    max_start, max_end = _snap_to_edges(candidate.start, candidate.end, n, edge_margin)

    thresh_count = 0
    alpha = shuffles * p
    xt = arr.copy()

    for i in range(shuffles):
        rng.shuffle(xt)
        if cbs_stat(xt).statistic >= max_t:
            thresh_count += 1
        if thresh_count > alpha:
            log.debug(
                "split [%d, %d) of %d values rejected after %d/%d permutations",
                max_start, max_end, n, i + 1, shuffles,
            )
            return ChangeTest(False, max_t, max_start, max_end)

    return ChangeTest(True, max_t, max_start, max_end)
