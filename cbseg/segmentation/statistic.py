"""
CBS test statistic, locating the sub-interval whose mean differs most from the rest of a sequence by taking the extrema of its mean-centred cumulative sum.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cbseg.exceptions import ComputationError


@dataclass(frozen=True)
class CandidateSplit:
    statistic: float
    start: int
    end: int


def cbs_stat(x: np.ndarray) -> CandidateSplit:
    """Return the CBS statistic of ``x`` and its candidate split ``[start, end)``.

    The split bounds come from the positions of the maximum and minimum of the
    centred cumulative sum; ties resolve to the first occurrence.
    """
    arr = np.asarray(x, dtype=float)
    n = len(arr)
    if n == 0:
        return CandidateSplit(statistic=0.0, start=0, end=0)

    y = np.cumsum(arr - np.mean(arr))

    e0 = int(np.argmax(y))
    e1 = int(np.argmin(y))
    i0, i1 = (e1, e0) if e1 < e0 else (e0, e1)

    denominator = (i1 - i0 + 1.0) * (n - (i1 - i0))
    if denominator == 0:
        return CandidateSplit(statistic=0.0, start=i0, end=i1 + 1)

    stat = float((y[i1] - y[i0]) ** 2 * n / denominator)
    if not np.isfinite(stat):
        raise ComputationError(f"non-finite CBS statistic over {n} values")

    return CandidateSplit(statistic=stat, start=i0, end=i1 + 1)
