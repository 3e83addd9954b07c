"""
Summaries of a segmentation result: ordering, changepoint extraction and per-segment statistics with the direction of each mean shift.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from cbseg.enums import ShiftDirection
from cbseg.segmentation.segmenter import Segment, as_series


@dataclass(frozen=True)
class SegmentSummary:
    start: int
    end: int
    length: int
    mean: float
    std: float
    direction: ShiftDirection


def sorted_segments(segments: Iterable[Segment]) -> List[Segment]:
    return sorted(segments, key=lambda s: s.start)


def changepoints(segments: Iterable[Segment]) -> List[int]:
    ordered = sorted_segments(segments)
    return [s.start for s in ordered[1:]]


def summarize(x: Iterable[float], segments: Iterable[Segment]) -> List[SegmentSummary]:
    arr = as_series(x)
    results: List[SegmentSummary] = []
    prev_mean: float | None = None

    for seg in sorted_segments(segments):
        if seg.start < 0 or seg.end > len(arr) or seg.length <= 0:
            raise ValueError(f"segment [{seg.start}, {seg.end}) is outside a series of {len(arr)} values")
        window = arr[seg.start:seg.end]
        mean = float(np.mean(window))
        direction = ShiftDirection.none if prev_mean is None else ShiftDirection.between(prev_mean, mean)
        results.append(SegmentSummary(
            start=seg.start,
            end=seg.end,
            length=seg.length,
            mean=round(mean, 6),
            std=round(float(np.std(window)), 6),
            direction=direction,
        ))
        prev_mean = mean

    return results
