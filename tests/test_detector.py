"""
Test cases for the permutation test, including edge snapping, whole-range candidates, early stopping and isolation of the input from shuffling.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

import pytest
import numpy as np

from config import settings
from cbseg.exceptions import ComputationError
from cbseg.segmentation.detector import ChangeTest, detect


def test_whole_range_candidate_is_not_significant(counting_rng):
    res = detect(np.array([1.0, -1.0]), 100, 0.05, counting_rng)
    assert res == ChangeTest(False, 1.0, 0, 2)
    assert counting_rng.calls == 0


def test_right_edge_is_snapped():
    x = np.array([0.0] * 10 + [10.0] * 3 + [0.0] * 2)
    res = detect(x, 0, 0.05, np.random.default_rng(0))
    assert res == ChangeTest(True, 180.0, 9, 15)


def test_left_edge_is_snapped():
    x = np.array([10.0, 10.0] + [0.0] * 10)
    res = detect(x, 0, 0.05, np.random.default_rng(0))
    assert res.is_significant
    assert (res.start, res.end) == (0, 12)


def test_edge_margin_follows_settings(monkeypatch):
    x = np.array([0.0] * 10 + [10.0] * 3 + [0.0] * 2)
    monkeypatch.setattr(settings, "cbs_edge_margin", 1)
    res = detect(x, 0, 0.05, np.random.default_rng(0))
    assert (res.start, res.end) == (9, 13)


def test_constant_input_stops_early(counting_rng):
    res = detect(np.full(20, 3.0), 100, 0.05, counting_rng)
    assert not res.is_significant
    # every permutation ties the observed statistic; the sixth exceeds 100 * 0.05
    assert counting_rng.calls == 6
    assert (res.start, res.end) == (0, 1)


def test_clear_shift_is_significant(steps):
    res = detect(np.array(steps, dtype=float), 1000, 0.05, np.random.default_rng(42))
    assert res.is_significant
    assert (res.start, res.end) == (8, 14)


def test_input_is_not_shuffled(steps):
    x = np.array(steps, dtype=float)
    before = x.copy()
    detect(x, 200, 0.05, np.random.default_rng(3))
    np.testing.assert_array_equal(x, before)


def test_early_exit_is_logged(caplog, counting_rng):
    caplog.set_level(logging.DEBUG, logger="cbseg.segmentation.detector")
    detect(np.full(20, 1.0), 100, 0.05, counting_rng)
    assert any("rejected after 6/100 permutations" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_same_seed_same_result(piecewise, seed):
    a = detect(piecewise, 300, 0.05, np.random.default_rng(seed))
    b = detect(piecewise, 300, 0.05, np.random.default_rng(seed))
    assert a == b


def test_computation_error_propagates(counting_rng):
    with pytest.raises(ComputationError):
        detect(np.array([1.0, 2.0, np.nan, 4.0, 5.0]), 100, 0.05, counting_rng)
    assert counting_rng.calls == 0
