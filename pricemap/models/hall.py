"""Hall geometry data models."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from pricemap.config import SEAT_FILL


class Point2D(BaseModel):
    """2D point in diagram units."""
    x: float
    y: float


class BoundingBox(BaseModel):
    """Axis-aligned box of a diagram primitive."""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def bottom(self) -> float:
        return self.y + self.height


class Seat(BaseModel):
    """A seat of the current diagram binding.

    Distance and rank are filled in by the ranker, the assigned price and color
    by the zone assigner.
    """
    id: str
    position: Point2D
    box: Optional[BoundingBox] = None
    corner_radius: Optional[float] = None
    distance_from_stage: Optional[float] = Field(default=None, ge=0)
    quantile_rank: Optional[float] = Field(default=None, ge=0, le=1)
    assigned_price: Optional[float] = None
    assigned_color: Optional[str] = None
    fill: str = SEAT_FILL


class Stage(BaseModel):
    """Stage reference of a diagram."""
    center: Point2D
    bottom_y: float
    source: Literal["rect", "path", "fallback"] = Field(
        description="Which resolution tier produced this stage"
    )

    @property
    def reference_point(self) -> Point2D:
        """Point seats are measured from: center x at the bottom edge."""
        return Point2D(x=self.center.x, y=self.bottom_y)


class SeatAssignment(BaseModel):
    """Finished seat to color assignment handed to a render sink."""
    model_config = ConfigDict(frozen=True)

    seat_id: str
    position: Point2D
    price: float
    color: str
