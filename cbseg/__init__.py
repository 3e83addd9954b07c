"""
cbseg: Circular Binary Segmentation of numeric sequences

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from cbseg.enums import ShiftDirection
from cbseg.exceptions import ComputationError, InvalidParameterError, SegmentationError
from cbseg.segmentation import CandidateSplit, ChangeTest, Segment, cbs, cbs_stat, detect, segment
from cbseg.summary import SegmentSummary, changepoints, sorted_segments, summarize

__all__ = [
    "ShiftDirection",
    "ComputationError",
    "InvalidParameterError",
    "SegmentationError",
    "CandidateSplit",
    "ChangeTest",
    "Segment",
    "cbs",
    "cbs_stat",
    "detect",
    "segment",
    "SegmentSummary",
    "changepoints",
    "sorted_segments",
    "summarize",
]
