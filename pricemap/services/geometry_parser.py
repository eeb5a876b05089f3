"""Parsing of seat and stage primitives out of hall diagrams.

Diagrams come in two encodings. The compact one draws every seat as a
``<rect>`` with the seat fill and the stage as a ``<rect>`` with the stage
fill. Older diagrams draw both as ``<path>`` elements whose position is the
first move-to pair of their ``d`` attribute.
"""
import logging
import re
import xml.etree.ElementTree as ET
from typing import Optional, Protocol, Union

from pricemap.config import (
    DEFAULT_CORNER_RADIUS,
    DEFAULT_DIAGRAM_WIDTH,
    DEFAULT_SEAT_HEIGHT,
    DEFAULT_SEAT_WIDTH,
    FALLBACK_STAGE_BOTTOM_Y,
    FALLBACK_STAGE_Y,
    LEGACY_SEAT_OFFSET,
    SEAT_FILL,
    STAGE_FILL,
)
from pricemap.models.hall import BoundingBox, Point2D, Seat, Stage

logger = logging.getLogger(__name__)

DiagramDocument = Union[str, bytes, ET.Element]

_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_MOVE_TO = re.compile(r"M\s*([\d.]+)[\s,]+([\d.]+)")


def parse_number(value: Optional[str]) -> Optional[float]:
    """Leading number of an attribute value, None if there is none."""
    if value is None:
        return None
    match = _NUMBER.match(value)
    if not match:
        return None
    return float(match.group(1))


def _number_or(value: Optional[str], default: float) -> float:
    # Zero counts as missing
    number = parse_number(value)
    return number if number else default


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _same_fill(fill: Optional[str], marker: str) -> bool:
    return fill is not None and fill.strip().lower() == marker.lower()


class GeometrySource(Protocol):
    """A diagram primitive that can stand for a seat or a stage."""

    def has_fill_marker(self, marker: str) -> bool:
        ...

    def bounding_box(self) -> Optional[BoundingBox]:
        ...

    def first_anchor_point(self) -> Optional[Point2D]:
        ...


class RectPrimitive:
    """A ``<rect>`` element of the compact encoding."""

    def __init__(self, element: ET.Element):
        self.element = element

    def has_fill_marker(self, marker: str) -> bool:
        return _same_fill(self.element.get("fill"), marker)

    def bounding_box(self, default_width: float = DEFAULT_SEAT_WIDTH,
                     default_height: float = DEFAULT_SEAT_HEIGHT) -> BoundingBox:
        return BoundingBox(
            x=_number_or(self.element.get("x"), 0.0),
            y=_number_or(self.element.get("y"), 0.0),
            width=_number_or(self.element.get("width"), default_width),
            height=_number_or(self.element.get("height"), default_height),
        )

    def first_anchor_point(self) -> Point2D:
        box = self.bounding_box()
        return Point2D(x=box.x, y=box.y)

    def corner_radius(self) -> float:
        return _number_or(self.element.get("rx"), DEFAULT_CORNER_RADIUS)


class PathPrimitive:
    """A ``<path>`` element of the legacy encoding."""

    def __init__(self, element: ET.Element):
        self.element = element

    def has_fill_marker(self, marker: str) -> bool:
        return _same_fill(self.element.get("fill"), marker)

    def bounding_box(self) -> Optional[BoundingBox]:
        anchor = self.first_anchor_point()
        if anchor is None:
            return None
        size = LEGACY_SEAT_OFFSET * 2
        return BoundingBox(x=anchor.x, y=anchor.y, width=size, height=size)

    def first_anchor_point(self) -> Optional[Point2D]:
        d = self.element.get("d")
        if not d:
            return None
        match = _MOVE_TO.search(d)
        if not match:
            return None
        # Compact path data runs numbers together ("M10.5.5 20")
        x, y = parse_number(match.group(1)), parse_number(match.group(2))
        if x is None or y is None:
            return None
        return Point2D(x=x, y=y)


class HallDiagram:
    """Typed view of a parsed hall diagram."""

    def __init__(self, root: ET.Element):
        self.root = root
        self.rects: list[RectPrimitive] = []
        self.paths: list[PathPrimitive] = []
        for element in root.iter():
            if not isinstance(element.tag, str):
                continue
            name = _local_name(element.tag)
            if name == "rect":
                self.rects.append(RectPrimitive(element))
            elif name == "path":
                self.paths.append(PathPrimitive(element))

    @property
    def width(self) -> float:
        """Diagram width from the viewBox, else the width attribute."""
        view_box = (self.root.get("viewBox") or "").replace(",", " ").split()
        if len(view_box) >= 3:
            width = parse_number(view_box[2])
            if width:
                return width
        return _number_or(self.root.get("width"), DEFAULT_DIAGRAM_WIDTH)

    def seat_sources(self) -> list[GeometrySource]:
        """Seat primitives of the encoding this diagram uses.

        Rect seats win; paths are consulted only when no rect seat exists.
        """
        rects = [r for r in self.rects if r.has_fill_marker(SEAT_FILL)]
        if rects:
            return rects
        return [p for p in self.paths if p.has_fill_marker(SEAT_FILL)]

    def parse_seats(self) -> list[Seat]:
        seats = []
        for index, source in enumerate(self.seat_sources()):
            if isinstance(source, RectPrimitive):
                box = source.bounding_box()
                seats.append(Seat(
                    id=f"place-{index}",
                    position=box.center,
                    box=box,
                    corner_radius=source.corner_radius(),
                ))
                continue

            anchor = source.first_anchor_point()
            if anchor is None:
                logger.debug(f"Skipping legacy seat place-{index} without a move-to anchor")
                continue
            seats.append(Seat(
                id=f"place-{index}",
                position=Point2D(x=anchor.x + LEGACY_SEAT_OFFSET, y=anchor.y + LEGACY_SEAT_OFFSET),
                box=source.bounding_box(),
            ))

        logger.info(f"Found {len(seats)} seats")
        return seats

    def find_stage(self) -> Stage:
        """
        Resolve the stage reference.

        Order: a stage rect, then a legacy stage path (the second one when
        there are several), then a fixed spot near the top of the diagram.
        """
        for rect in self.rects:
            if rect.has_fill_marker(STAGE_FILL):
                box = rect.bounding_box(default_width=0.0, default_height=0.0)
                stage = Stage(center=box.center, bottom_y=box.bottom, source="rect")
                logger.info(f"Stage (rect): center={stage.center}, bottom_y={stage.bottom_y}")
                return stage

        stage_paths = [p for p in self.paths if p.has_fill_marker(STAGE_FILL)]
        if stage_paths:
            stage_path = stage_paths[1] if len(stage_paths) > 1 else stage_paths[0]
            anchor = stage_path.first_anchor_point()
            if anchor is not None:
                stage = Stage(
                    center=Point2D(x=self.width / 2, y=anchor.y),
                    bottom_y=anchor.y,
                    source="path",
                )
                logger.info(f"Stage (path): center={stage.center}, bottom_y={stage.bottom_y}")
                return stage

        stage = Stage(
            center=Point2D(x=self.width / 2, y=FALLBACK_STAGE_Y),
            bottom_y=FALLBACK_STAGE_BOTTOM_Y,
            source="fallback",
        )
        logger.info(f"Stage (fallback): center={stage.center}, bottom_y={stage.bottom_y}")
        return stage


def parse_diagram(document: DiagramDocument) -> HallDiagram:
    """
    Parse a diagram document.

    Args:
        document: SVG markup as text or bytes, or an already parsed root element

    Returns:
        HallDiagram over the document

    Raises:
        ValueError: If the markup is not well-formed XML
    """
    if isinstance(document, ET.Element):
        return HallDiagram(document)

    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise ValueError(f"Malformed diagram markup: {e}") from e
    return HallDiagram(root)
