"""
Segmentation subpackage for cbseg.

This module re-exports the statistic, the permutation test and the segmenter
from :mod:`cbseg.segmentation.statistic`, :mod:`cbseg.segmentation.detector`
and :mod:`cbseg.segmentation.segmenter`, giving consumers a single import path
of ``cbseg.segmentation``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from cbseg.segmentation.statistic import CandidateSplit, cbs_stat
from cbseg.segmentation.detector import ChangeTest, detect
from cbseg.segmentation.segmenter import Segment, cbs, segment

__all__ = ["CandidateSplit", "cbs_stat", "ChangeTest", "detect", "Segment", "cbs", "segment"]
