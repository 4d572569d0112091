from __future__ import annotations

import unittest

import numpy as np

from scalegrid import InvalidSmoothFactorError
from scalegrid.smoothing import (
    ExponentialSmoother,
    MovingAverageSmoother,
    moving_average,
    path_length,
    smooth_pair,
)


class MovingAverageTests(unittest.TestCase):
    def test_spike_is_attenuated_by_window(self) -> None:
        out = moving_average([1, 1, 1, 5, 1, 1, 1], 3)
        self.assertEqual(out.shape, (7,))
        np.testing.assert_allclose(out, [1, 1, 1, 7 / 3, 7 / 3, 7 / 3, 1])
        self.assertAlmostEqual(float(out.max()) - 1.0, 4.0 / 3.0)

    def test_factor_one_is_identity(self) -> None:
        values = [3.0, -1.0, 4.0, 1.5]
        np.testing.assert_allclose(moving_average(values, 1), values)

    def test_zero_padding_ramps_from_zero(self) -> None:
        np.testing.assert_allclose(moving_average([3, 3, 3], 3, zero_padding=True), [1, 2, 3])

    def test_edge_padding_repeats_first_sample(self) -> None:
        np.testing.assert_allclose(moving_average([3, 3, 3], 3), [3, 3, 3])

    def test_window_ends_on_current_sample(self) -> None:
        np.testing.assert_allclose(moving_average([5, 1, 1], 2), [5, 3, 1])
        np.testing.assert_allclose(moving_average([4, 4], 2, zero_padding=True), [2, 4])
        self.assertEqual(moving_average([7], 5).tolist(), [7.0])

    def test_empty_and_invalid_factor(self) -> None:
        self.assertEqual(moving_average([], 4).size, 0)
        with self.assertRaises(InvalidSmoothFactorError):
            moving_average([1, 2], 0)


class SmootherTests(unittest.TestCase):
    def test_moving_average_smoother_is_per_axis(self) -> None:
        pts = np.asarray([[0, 0], [0, 0], [6, 3]], dtype=np.float64)
        out = MovingAverageSmoother(factor=2).smooth(pts)
        np.testing.assert_allclose(out, [[0, 0], [0, 0], [3, 1.5]])

    def test_exponential_smoother_blends_with_previous_output(self) -> None:
        pts = np.asarray([[0, 0], [10, 20], [10, 20]], dtype=np.float64)
        out = ExponentialSmoother(factor=0.5).smooth(pts)
        np.testing.assert_allclose(out, [[0, 0], [5, 10], [7.5, 15]])

    def test_exponential_factor_bounds(self) -> None:
        with self.assertRaises(InvalidSmoothFactorError):
            ExponentialSmoother(factor=0.0)
        with self.assertRaises(InvalidSmoothFactorError):
            ExponentialSmoother(factor=1.5)

    def test_smooth_pair_defaults_missing_last_to_zero(self) -> None:
        self.assertEqual(smooth_pair((4, 8), (None, None), 0.25), (1.0, 2.0))
        self.assertEqual(smooth_pair((4, 8), (0, 4), 0.5), (2.0, 6.0))

    def test_path_length(self) -> None:
        self.assertEqual(path_length([]), 0.0)
        self.assertEqual(path_length([(1, 1)]), 0.0)
        self.assertEqual(path_length([(0, 0), (3, 4)]), 5.0)
        self.assertEqual(path_length([(0, 0), (3, 4), (3, 0)]), 9.0)
        with self.assertRaises(ValueError):
            path_length([1, 2, 3])


if __name__ == "__main__":
    unittest.main()
