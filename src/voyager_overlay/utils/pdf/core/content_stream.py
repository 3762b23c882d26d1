"""
Content stream builder: emits PDF path, text and graphics-state operators.

Operators are collected as body parts and joined between a fixed header and
trailer only when the stream is converted with ``str()``, so the trailer
(``Q`` when the stream pushes graphics state) always stays last.
"""

from __future__ import annotations

import math
import unicodedata

from voyager_overlay.core.models.geometry import Color, Coord, Dimensions, FillRule, HorizontalAlignment
from voyager_overlay.utils.errors import NoCurrentPointError

# Control point distance for a quarter circle of radius 1.
ARC_KAPPA = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0

# (sign dx, sign dy, clockwise) -> ((axis, sign) for control point 1 from the start,
#                                   (axis, sign) for control point 2 from the end)
_ARC_CONTROL_OFFSETS: dict[tuple[int, int, bool], tuple[tuple[str, int], tuple[str, int]]] = {
    (1, -1, True): (("x", 1), ("y", 1)),
    (1, 1, True): (("y", 1), ("x", -1)),
    (-1, 1, True): (("x", -1), ("y", -1)),
    (-1, -1, True): (("y", -1), ("x", 1)),
    (1, -1, False): (("y", -1), ("x", -1)),
    (1, 1, False): (("x", 1), ("y", -1)),
    (-1, 1, False): (("y", 1), ("x", 1)),
    (-1, -1, False): (("x", -1), ("y", 1)),
}

_FILL_OPS = {FillRule.NONZERO_WINDING: "f", FillRule.EVEN_ODD: "f*"}
_FILL_STROKE_OPS = {FillRule.NONZERO_WINDING: "B", FillRule.EVEN_ODD: "B*"}
_CLOSE_FILL_STROKE_OPS = {FillRule.NONZERO_WINDING: "b", FillRule.EVEN_ODD: "b*"}


def fmt(value: float) -> str:
    """Compact real number, printf ``%g`` style."""
    return format(value, "g")


def _normalize_ascii(text: str) -> str:
    """Remove diacritics to stay compatible with built-in PDF Type1 fonts."""
    normalized = unicodedata.normalize("NFKD", str(text))
    return normalized.encode("ascii", "ignore").decode("ascii")


def escape_pdf_text(text: str) -> str:
    ascii_text = _normalize_ascii(text)
    return ascii_text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _offset(point: Coord, axis: str, amount: float) -> Coord:
    if axis == "x":
        return Coord(point.x + amount, point.y)
    return Coord(point.x, point.y + amount)


class ContentStream:
    """Chainable builder for one drawing unit (a mark group, an overlay, a page)."""

    def __init__(self, push_graphics_state: bool = False):
        self.header = "q " if push_graphics_state else ""
        self.trailer = "Q\n" if push_graphics_state else ""
        self._parts: list[str] = []
        self.last_coord = Coord(0.0, 0.0)
        self.have_last_coord = False

    def __str__(self) -> str:
        return self.header + "".join(self._parts) + self.trailer

    @property
    def has_current_point(self) -> bool:
        return self.have_last_coord

    @property
    def current_point(self) -> Coord | None:
        return self.last_coord if self.have_last_coord else None

    def _insert(self, op: str) -> "ContentStream":
        self._parts.append(op)
        return self

    def _require_current_point(self, operation: str) -> Coord:
        if not self.have_last_coord:
            raise NoCurrentPointError(f"{operation}() origin unknown")
        return self.last_coord

    def append(self, other: "ContentStream | str") -> "ContentStream":
        """Splice finished operator text (e.g. a nested drawing unit) before the trailer."""
        return self._insert(str(other))

    # -------- graphics state --------

    def save_state(self) -> "ContentStream":
        return self._insert("q\n")

    def restore_state(self) -> "ContentStream":
        return self._insert("Q\n")

    def concat_matrix(self, a: float, b: float, c: float, d: float, e: float, f: float) -> "ContentStream":
        return self._insert(f"{fmt(a)} {fmt(b)} {fmt(c)} {fmt(d)} {fmt(e)} {fmt(f)} cm ")

    def translate(self, dx: float, dy: float) -> "ContentStream":
        return self._insert(f"1 0 0 1 {fmt(dx)} {fmt(dy)} cm\n")

    def set_color_space(self, color_space: str, fill: bool, stroke: bool) -> "ContentStream":
        if fill:
            self._insert(f"/{color_space}cs ")
        if stroke:
            self._insert(f"/{color_space}CS ")
        return self

    def set_color(self, color: Color, fill: bool, stroke: bool) -> "ContentStream":
        rgb = f"{fmt(color.r)} {fmt(color.g)} {fmt(color.b)}"
        if fill:
            self._insert(f"{rgb} sc ")
        if stroke:
            self._insert(f"{rgb} SC ")
        return self

    def set_line_width(self, width: float) -> "ContentStream":
        return self._insert(f"{fmt(width)} w ")

    # -------- path construction --------

    def move_to(self, dest: Coord) -> "ContentStream":
        self._insert(f"{fmt(dest.x)} {fmt(dest.y)} m ")
        self.last_coord = dest
        self.have_last_coord = True
        return self

    def line_to(self, dest: Coord) -> "ContentStream":
        self._insert(f"{fmt(dest.x)} {fmt(dest.y)} l ")
        self.last_coord = dest
        self.have_last_coord = True
        return self

    def arc_to(self, dest: Coord, clockwise: bool = True) -> "ContentStream":
        """
        Quarter circle from the current point to ``dest`` as one cubic Bezier.

        Only 90 degree, axis-aligned arcs are supported: |dx| must equal |dy|.
        The radius is taken from dx alone.
        """
        p0 = self._require_current_point("arc_to")
        dx = dest.x - p0.x
        dy = dest.y - p0.y
        radius = abs(dx)
        c = radius * ARC_KAPPA

        key = (1 if dx > 0 else -1, 1 if dy > 0 else -1, bool(clockwise))
        (axis1, sign1), (axis2, sign2) = _ARC_CONTROL_OFFSETS[key]
        p1 = _offset(p0, axis1, sign1 * c)
        p2 = _offset(dest, axis2, sign2 * c)

        self._insert(
            f"{fmt(p1.x)} {fmt(p1.y)} {fmt(p2.x)} {fmt(p2.y)} {fmt(dest.x)} {fmt(dest.y)} c\n"
        )
        self.last_coord = dest
        self.have_last_coord = True
        return self

    def rect(self, dimensions: Dimensions) -> "ContentStream":
        """Top, right and bottom edges from the current (top left) point; the path stays open."""
        origin = self._require_current_point("rect")
        right = origin.x + dimensions.width
        bottom = origin.y - dimensions.height
        self.line_to(Coord(right, origin.y))
        self.line_to(Coord(right, bottom))
        self.line_to(Coord(origin.x, bottom))
        return self

    def rounded_rect(self, dimensions: Dimensions, radius: float) -> "ContentStream":
        """
        Rounded rectangle whose un-rounded top left corner is the current point.

        Traced clockwise from the top of the left edge. The pen ends back on the
        nominal corner so a following close operator behaves like after rect().
        """
        origin = self._require_current_point("rounded_rect")
        if radius == 0.0:
            return self.rect(dimensions)

        left = origin.x
        top = origin.y
        right = origin.x + dimensions.width
        bottom = origin.y - dimensions.height

        self.move_to(Coord(left, top - radius))
        self.arc_to(Coord(left + radius, top))  # top left
        self.line_to(Coord(right - radius, top))
        self.arc_to(Coord(right, top - radius))  # top right
        self.line_to(Coord(right, bottom + radius))
        self.arc_to(Coord(right - radius, bottom))  # bottom right
        self.line_to(Coord(left + radius, bottom))
        self.arc_to(Coord(left, bottom + radius))  # bottom left
        self.line_to(Coord(left, top - radius))
        self.move_to(origin)
        return self

    # -------- text --------

    def text(
        self,
        dest: Coord,
        horizontal_alignment: HorizontalAlignment,
        text: str,
        font_name: str,
        font_size: float,
    ) -> "ContentStream":
        """
        Self-contained text object. ``text`` goes into a literal string as is;
        callers escape it with escape_pdf_text() when needed.
        """
        width = 0.0  # glyph widths are not measured
        if horizontal_alignment is HorizontalAlignment.CENTER:
            x = dest.x - width / 2.0
        elif horizontal_alignment is HorizontalAlignment.RIGHT:
            x = dest.x - width
        else:
            x = dest.x

        self._insert("BT ")
        self._insert(f"{fmt(x)} {fmt(dest.y)} Td ")
        self._insert("0 Tr ")  # fill
        self._insert(f"/{font_name} {fmt(font_size)} Tf\n")
        self._insert(f"({text}) Tj ")
        self._insert("ET\n")
        return self

    # -------- path painting --------

    def path_close(self) -> "ContentStream":
        self._insert("h\n")
        self.have_last_coord = False
        return self

    def path_stroke(self) -> "ContentStream":
        return self._insert("S\n")

    def path_close_stroke(self) -> "ContentStream":
        self._insert("s\n")
        self.have_last_coord = False
        return self

    def path_fill(self, fill_rule: FillRule = FillRule.NONZERO_WINDING) -> "ContentStream":
        return self._insert(_FILL_OPS[fill_rule] + "\n")

    def path_fill_stroke(self, fill_rule: FillRule = FillRule.NONZERO_WINDING) -> "ContentStream":
        return self._insert(_FILL_STROKE_OPS[fill_rule] + "\n")

    def path_close_fill_stroke(self, fill_rule: FillRule = FillRule.NONZERO_WINDING) -> "ContentStream":
        self._insert(_CLOSE_FILL_STROKE_OPS[fill_rule] + "\n")
        self.have_last_coord = False
        return self
