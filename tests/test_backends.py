from __future__ import annotations

import unittest

import numpy as np
import torch

from lineseries import BLUE, RED, LineSeries, RecordingBackend, ShapeStyle, draw_series
from lineseries.raster import RasterBackend, compile_frame_tensor, draw_circle, draw_polyline, new_canvas


class RecordingBackendTests(unittest.TestCase):
    def test_draw_calls_follow_emission_order(self) -> None:
        backend = RecordingBackend()
        style = ShapeStyle(color=RED, stroke_width=3)
        series = LineSeries.new([(x, x) for x in range(8)], style).point_size(2)

        issued = draw_series(backend, series)

        self.assertEqual(issued, 9)
        self.assertEqual(backend.draw_count, 9)
        self.assertEqual(backend.num_draw_circle_call, 8)
        self.assertEqual(backend.num_draw_path_call, 1)
        self.assertEqual([c.kind for c in backend.calls], ["circle"] * 8 + ["path"])
        self.assertEqual([c.points[0] for c in backend.calls[:8]], [(x, x) for x in range(8)])
        self.assertEqual(backend.calls[-1].points, tuple((x, x) for x in range(8)))
        self.assertTrue(all(c.style.color == RED and c.style.stroke_width == 3 for c in backend.calls))

    def test_path_only_series_issues_single_call(self) -> None:
        backend = RecordingBackend()
        draw_series(backend, LineSeries.from_y([0.1, 0.2, 0.3], "u8"))
        self.assertEqual(backend.num_draw_path_call, 1)
        self.assertEqual(backend.num_draw_circle_call, 0)

    def test_empty_series_issues_no_calls(self) -> None:
        backend = RecordingBackend()
        self.assertEqual(draw_series(backend, LineSeries.from_xy([], [1]).point_size(4)), 0)
        self.assertEqual(backend.draw_count, 0)

    def test_reset(self) -> None:
        backend = RecordingBackend()
        draw_series(backend, LineSeries.from_xy([0], [0]))
        backend.reset()
        self.assertEqual(backend.draw_count, 0)
        self.assertEqual(backend.num_draw_path_call, 0)

    def test_backend_errors_propagate(self) -> None:
        class FailingBackend(RecordingBackend):
            def draw_path(self, points, style) -> None:  # type: ignore[no-untyped-def]
                raise RuntimeError("backend down")

        with self.assertRaisesRegex(RuntimeError, "backend down"):
            draw_series(FailingBackend(), LineSeries.from_xy([0, 1], [0, 1]))


class RasterBackendTests(unittest.TestCase):
    def test_path_is_stroked_between_points(self) -> None:
        backend = RasterBackend(20, 10)
        draw_series(backend, LineSeries.new([(0, 5), (19, 5)], RED))
        frame = backend.to_rgba()
        self.assertEqual(tuple(frame[5, 0]), RED)
        self.assertEqual(tuple(frame[5, 10]), RED)
        self.assertEqual(tuple(frame[5, 19]), RED)
        self.assertEqual(tuple(frame[0, 0]), (255, 255, 255, 255))

    def test_markers_use_radius_and_fill(self) -> None:
        backend = RasterBackend(30, 30)
        draw_series(backend, LineSeries.new([(10, 10)], ShapeStyle(color=BLUE).fill()).point_size(4))
        frame = backend.to_rgba()
        self.assertEqual(tuple(frame[10, 14]), BLUE)
        self.assertEqual(tuple(frame[12, 12]), BLUE)
        self.assertEqual(tuple(frame[10, 15]), (255, 255, 255, 255))
        self.assertEqual(backend.draw_count, 2)

    def test_outlined_marker_leaves_center_clear(self) -> None:
        canvas = new_canvas(20, 20)
        draw_circle(canvas, 10, 10, 5, RED, filled=False, width=1)
        self.assertEqual(tuple(canvas[10, 15]), RED)
        self.assertEqual(tuple(canvas[10, 10]), (255, 255, 255, 255))

    def test_zero_width_outline_marker_draws_nothing(self) -> None:
        canvas = new_canvas(12, 12)
        draw_circle(canvas, 6, 6, 4, RED, filled=False, width=0)
        self.assertTrue(np.all(canvas == 255))

        draw_circle(canvas, 6, 6, 4, RED, filled=True, width=0)
        self.assertEqual(tuple(canvas[6, 6]), RED)

    def test_zero_width_path_draws_nothing(self) -> None:
        canvas = new_canvas(12, 12)
        draw_polyline(canvas, np.asarray([0, 11]), np.asarray([6, 6]), RED, width=0)
        self.assertTrue(np.all(canvas == 255))

    def test_wide_stroke_and_single_point_use_square_brush(self) -> None:
        canvas = new_canvas(12, 12)
        draw_polyline(canvas, np.asarray([2, 9]), np.asarray([5, 5]), RED, width=3)
        self.assertEqual(tuple(canvas[4, 2]), RED)
        self.assertEqual(tuple(canvas[6, 9]), RED)
        self.assertEqual(tuple(canvas[3, 5]), (255, 255, 255, 255))

        canvas = new_canvas(5, 5)
        draw_polyline(canvas, np.asarray([2]), np.asarray([2]), BLUE, width=3)
        self.assertEqual(int(np.sum(np.all(canvas == np.asarray(BLUE, dtype=np.uint8), axis=-1))), 9)

    def test_diagonal_segment_visits_every_step(self) -> None:
        canvas = new_canvas(8, 8)
        draw_polyline(canvas, np.asarray([7, 0]), np.asarray([7, 0]), RED)
        for i in range(8):
            self.assertEqual(tuple(canvas[i, i]), RED)
        self.assertEqual(tuple(canvas[0, 7]), (255, 255, 255, 255))

    def test_non_finite_points_are_skipped(self) -> None:
        backend = RasterBackend(10, 10)
        with self.assertLogs("lineseries.raster.backend", level="WARNING"):
            draw_series(backend, LineSeries.new([(1, 1), (float("nan"), 2), (8, 8)], RED))
        frame = backend.to_rgba()
        self.assertEqual(tuple(frame[1, 1]), RED)
        self.assertEqual(tuple(frame[8, 8]), RED)
        self.assertEqual(tuple(frame[4, 4]), (255, 255, 255, 255))

    def test_points_outside_canvas_are_clipped(self) -> None:
        backend = RasterBackend(8, 8)
        draw_series(backend, LineSeries.new([(-20, 4), (40, 4)], RED))
        frame = backend.to_rgba()
        self.assertTrue(np.all(frame[4, :, 0] == 255))
        self.assertTrue(np.all(frame[4, :, 1] == 0))

    def test_to_tensor_and_clear(self) -> None:
        backend = RasterBackend(6, 4)
        draw_series(backend, LineSeries.from_y([1, 1, 1], "u8"))
        tensor = backend.to_tensor()
        self.assertEqual(tuple(tensor.shape), (4, 6, 4))
        self.assertEqual(tensor.dtype, torch.uint8)
        self.assertEqual(tuple(tensor[1, 2].tolist()), (0, 0, 0, 255))

        backend.clear()
        self.assertEqual(backend.draw_count, 0)
        self.assertTrue(np.all(backend.to_rgba() == 255))

    def test_compile_frame_tensor_validates_input(self) -> None:
        with self.assertRaisesRegex(ValueError, "uint8"):
            compile_frame_tensor(np.zeros((2, 2, 4), dtype=np.float32))
        with self.assertRaisesRegex(ValueError, "shape"):
            compile_frame_tensor(np.zeros((2, 2, 3), dtype=np.uint8))


if __name__ == "__main__":
    unittest.main()
