from __future__ import annotations

from pathlib import Path
import tempfile
import unittest
import xml.etree.ElementTree as ET

from scalegrid.canvas import SvgCanvas, format_points, parse_points


class SvgCanvasTests(unittest.TestCase):
    def test_half_size_queries(self) -> None:
        canvas = SvgCanvas(640, 480)
        self.assertEqual((canvas.cx(), canvas.cy()), (320.0, 240.0))

    def test_line_stroke_style(self) -> None:
        canvas = SvgCanvas(100, 100)
        handle = canvas.line(0, 50, 100, 50.5).stroke({"width": 2, "color": "black"})
        elem = handle.element
        self.assertEqual(elem.get("y2"), "50.5")
        self.assertEqual(elem.get("stroke"), "black")
        self.assertEqual(elem.get("stroke-width"), "2")

    def test_polyline_plot_and_remove(self) -> None:
        canvas = SvgCanvas(100, 100)
        handle = canvas.polyline().fill("#00000000")
        handle.plot([(0, 0), (10.25, 20)])
        self.assertEqual(handle.element.get("points"), "0,0 10.25,20")
        self.assertEqual(handle.points(), [(0.0, 0.0), (10.25, 20.0)])
        self.assertEqual(len(canvas.elements("polyline")), 1)
        handle.remove()
        handle.remove()
        self.assertTrue(handle.removed)
        self.assertEqual(canvas.elements("polyline"), [])

    def test_animate_records_transition_without_touching_points(self) -> None:
        canvas = SvgCanvas(100, 100)
        handle = canvas.polyline().plot([(0, 0), (1, 1)])
        handle.animate().plot([(0, 5), (1, 6)])
        anim = handle.element.find("animate")
        self.assertIsNotNone(anim)
        assert anim is not None
        self.assertEqual(anim.get("from"), "0,0 1,1")
        self.assertEqual(anim.get("to"), "0,5 1,6")
        self.assertEqual(handle.element.get("points"), "0,0 1,1")

    def test_text_move_and_center(self) -> None:
        canvas = SvgCanvas(100, 100)
        moved = canvas.text("1").move(10, 20)
        centered = canvas.text("x").center(50, 60).attr({"font-size": 12})
        self.assertEqual((moved.element.get("x"), moved.element.get("y")), ("10", "20"))
        self.assertEqual(centered.element.get("text-anchor"), "middle")
        self.assertEqual(centered.element.get("font-size"), "12")
        self.assertEqual(centered.content, "x")

    def test_markup_parses_and_writes(self) -> None:
        canvas = SvgCanvas(120, 80)
        canvas.line(0, 0, 120, 80).stroke("red")
        root = ET.fromstring(canvas.to_markup())
        self.assertEqual(root.attrib["viewBox"], "0 0 120 80")
        with tempfile.TemporaryDirectory() as tmp:
            out = canvas.write(Path(tmp) / "grid.svg")
            self.assertIn("<line", out.read_text(encoding="utf-8"))

    def test_point_string_helpers(self) -> None:
        self.assertEqual(format_points([]), "")
        self.assertEqual(parse_points("1,2 3,4"), [(1.0, 2.0), (3.0, 4.0)])

    def test_invalid_size_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SvgCanvas(0, 10)


if __name__ == "__main__":
    unittest.main()
