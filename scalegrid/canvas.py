from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol, Sequence
import xml.etree.ElementTree as ET


SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_ANIMATION_DURATION = "300ms"

Point = tuple[float, float]
StyleLike = Mapping[str, Any] | str


class LineHandle(Protocol):
    def stroke(self, style: StyleLike) -> "LineHandle":
        ...

    def remove(self) -> None:
        ...


class PolylineAnimation(Protocol):
    def plot(self, points: Sequence[Point]) -> Any:
        ...


class PolylineHandle(Protocol):
    def fill(self, style: StyleLike) -> "PolylineHandle":
        ...

    def stroke(self, style: StyleLike) -> "PolylineHandle":
        ...

    def plot(self, points: Sequence[Point]) -> "PolylineHandle":
        ...

    def animate(self) -> PolylineAnimation:
        ...

    def remove(self) -> None:
        ...


class TextHandle(Protocol):
    def move(self, x: float, y: float) -> "TextHandle":
        ...

    def center(self, x: float, y: float) -> "TextHandle":
        ...

    def attr(self, style: Mapping[str, Any]) -> "TextHandle":
        ...

    def remove(self) -> None:
        ...


class DrawingCanvas(Protocol):
    """Primitive set the grid and tracker draw through."""

    def line(self, x1: float, y1: float, x2: float, y2: float) -> LineHandle:
        ...

    def polyline(self) -> PolylineHandle:
        ...

    def text(self, content: str) -> TextHandle:
        ...

    def cx(self) -> float:
        ...

    def cy(self) -> float:
        ...


class SvgElementHandle:
    def __init__(self, parent: ET.Element, element: ET.Element) -> None:
        self._parent = parent
        self.element = element

    @property
    def removed(self) -> bool:
        return self.element not in list(self._parent)

    def attr(self, style: Mapping[str, Any]) -> "SvgElementHandle":
        for key, value in style.items():
            self.element.set(str(key), _format_value(value))
        return self

    def stroke(self, style: StyleLike) -> "SvgElementHandle":
        if isinstance(style, str):
            self.element.set("stroke", style)
            return self
        if "color" in style:
            self.element.set("stroke", str(style["color"]))
        if "width" in style:
            self.element.set("stroke-width", _format_number(style["width"]))
        for key, value in style.items():
            if key not in ("color", "width"):
                self.element.set(f"stroke-{key}", _format_value(value))
        return self

    def fill(self, style: StyleLike) -> "SvgElementHandle":
        if isinstance(style, str):
            self.element.set("fill", style)
            return self
        if "color" in style:
            self.element.set("fill", str(style["color"]))
        if "opacity" in style:
            self.element.set("fill-opacity", _format_number(style["opacity"]))
        return self

    def remove(self) -> None:
        if not self.removed:
            self._parent.remove(self.element)


class SvgLine(SvgElementHandle):
    pass


class SvgPolylineAnimation:
    def __init__(self, handle: "SvgPolyline", duration: str) -> None:
        self._handle = handle
        self._duration = duration

    def plot(self, points: Sequence[Point]) -> "SvgPolyline":
        # Start from the shape currently on screen, then keep only this animation.
        start = self._handle.displayed_points_attr()
        self._handle.clear_animations()
        anim = ET.SubElement(self._handle.element, "animate")
        anim.set("attributeName", "points")
        anim.set("from", start)
        anim.set("to", format_points(points))
        anim.set("dur", self._duration)
        anim.set("fill", "freeze")
        return self._handle


class SvgPolyline(SvgElementHandle):
    def plot(self, points: Sequence[Point]) -> "SvgPolyline":
        # A frozen animation would mask the new static points.
        self.clear_animations()
        self.element.set("points", format_points(points))
        return self

    def animations(self) -> list[ET.Element]:
        return self.element.findall("animate")

    def clear_animations(self) -> None:
        for anim in self.animations():
            self.element.remove(anim)

    def displayed_points_attr(self) -> str:
        pending = self.animations()
        if pending:
            return pending[-1].get("to", "")
        return self.element.get("points", "")

    def points(self) -> list[Point]:
        return parse_points(self.element.get("points", ""))

    def animate(self, duration: str = DEFAULT_ANIMATION_DURATION) -> SvgPolylineAnimation:
        return SvgPolylineAnimation(self, duration)


class SvgText(SvgElementHandle):
    def move(self, x: float, y: float) -> "SvgText":
        self.element.set("x", _format_number(x))
        self.element.set("y", _format_number(y))
        return self

    def center(self, x: float, y: float) -> "SvgText":
        self.move(x, y)
        self.element.set("text-anchor", "middle")
        self.element.set("dominant-baseline", "middle")
        return self

    @property
    def content(self) -> str:
        return self.element.text or ""


class SvgCanvas:
    """In-memory SVG document implementing the drawing primitives."""

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = float(width)
        self.height = float(height)
        self.root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": _format_number(width),
                "height": _format_number(height),
                "viewBox": f"0 0 {_format_number(width)} {_format_number(height)}",
            },
        )

    def cx(self) -> float:
        return self.width / 2.0

    def cy(self) -> float:
        return self.height / 2.0

    def line(self, x1: float, y1: float, x2: float, y2: float) -> SvgLine:
        elem = ET.SubElement(
            self.root,
            "line",
            {
                "x1": _format_number(x1),
                "y1": _format_number(y1),
                "x2": _format_number(x2),
                "y2": _format_number(y2),
            },
        )
        return SvgLine(self.root, elem)

    def polyline(self) -> SvgPolyline:
        elem = ET.SubElement(self.root, "polyline", {"points": "", "fill": "none"})
        return SvgPolyline(self.root, elem)

    def text(self, content: str) -> SvgText:
        elem = ET.SubElement(self.root, "text")
        elem.text = str(content)
        return SvgText(self.root, elem)

    def elements(self, tag: str | None = None) -> list[ET.Element]:
        return [child for child in self.root if tag is None or child.tag == tag]

    def to_markup(self) -> str:
        return ET.tostring(self.root, encoding="unicode")

    def write(self, path: str | Path) -> Path:
        out = Path(path)
        out.write_text(self.to_markup(), encoding="utf-8")
        return out


def format_points(points: Iterable[Sequence[float]]) -> str:
    return " ".join(f"{_format_number(x)},{_format_number(y)}" for x, y in points)


def parse_points(value: str) -> list[Point]:
    parts = value.replace(",", " ").split()
    it = iter(parts)
    return [(float(x_str), float(y_str)) for x_str, y_str in zip(it, it)]


def _format_number(value: Any) -> str:
    num = float(value)
    if num.is_integer():
        return str(int(num))
    return repr(round(num, 6))


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    return str(value)
