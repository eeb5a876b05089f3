"""Service for coloring the seats of a hall diagram by price."""
import logging
from typing import Optional, Sequence

from pricemap.config import SEAT_FILL
from pricemap.models.hall import Seat, SeatAssignment, Stage
from pricemap.models.price import PriceColor
from pricemap.services.geometry_parser import DiagramDocument, HallDiagram, parse_diagram
from pricemap.utils.geometry import distance, round_half_up

logger = logging.getLogger(__name__)


class GeometryBinding:
    """Seats and stage of one diagram, colored by distance to the stage.

    Parsed seats and the resolved stage are cached on the binding; binding a
    new diagram means creating a new GeometryBinding.
    """

    def __init__(self, diagram: HallDiagram):
        self.diagram = diagram
        self.seats: list[Seat] = []
        self.stage: Optional[Stage] = None

    def parse_seats(self) -> list[Seat]:
        """Extract the diagram's seats, replacing any previously parsed ones."""
        self.seats = self.diagram.parse_seats()
        return self.seats

    def find_stage(self) -> Stage:
        """Resolve the stage reference of the diagram."""
        self.stage = self.diagram.find_stage()
        return self.stage

    def calculate_distance(self, seat: Seat) -> float:
        """Distance from a seat to the middle of the stage's bottom edge."""
        if self.stage is None:
            self.find_stage()
        return distance(seat.position, self.stage.reference_point)

    def rank_by_distance(self) -> list[Seat]:
        """
        Compute every seat's distance to the stage and its quantile rank.

        The nearest seat gets rank 0 and the farthest rank 1. Equal distances
        keep their parse order.

        Returns:
            Seats in parse order, with distance and rank filled in
        """
        if not self.seats:
            self.parse_seats()

        for seat in self.seats:
            seat.distance_from_stage = self.calculate_distance(seat)

        by_distance = sorted(self.seats, key=lambda s: s.distance_from_stage)
        last = (len(by_distance) - 1) or 1
        for index, seat in enumerate(by_distance):
            seat.quantile_rank = index / last

        return self.seats

    def apply_colors(self, price_colors: Sequence[PriceColor]) -> list[SeatAssignment]:
        """
        Assign each seat a price band by its rank.

        Seats nearest the stage get the most expensive band and the farthest
        seats the cheapest.

        Args:
            price_colors: Output of the price mapper, in any order

        Returns:
            Seat assignments in seat parse order
        """
        if not self.seats or self.seats[0].quantile_rank is None:
            self.rank_by_distance()

        if not price_colors:
            return []

        sorted_colors = sorted(price_colors, key=lambda pc: pc.price)
        num_zones = len(sorted_colors)

        # Zones are resolved before any seat is touched
        zones = [self.zone_index(seat.quantile_rank, num_zones) for seat in self.seats]

        assignments = []
        for seat, zone in zip(self.seats, zones):
            color_data = sorted_colors[zone]
            seat.assigned_price = color_data.price
            seat.assigned_color = color_data.color
            seat.fill = color_data.color
            assignments.append(SeatAssignment(
                seat_id=seat.id,
                position=seat.position,
                price=color_data.price,
                color=color_data.color,
            ))

        logger.debug(f"Colored {len(assignments)} seats with {num_zones} price zones")
        return assignments

    @staticmethod
    def zone_index(quantile_rank: float, num_zones: int) -> int:
        """Index into the ascending price list for a seat rank."""
        zone = round_half_up((1 - quantile_rank) * (num_zones - 1))
        return max(0, min(num_zones - 1, zone))

    def reset(self) -> None:
        """Return every seat to the neutral fill and drop its assignment."""
        for seat in self.seats:
            seat.fill = SEAT_FILL
            seat.assigned_price = None
            seat.assigned_color = None


def bind_geometry(document: DiagramDocument) -> GeometryBinding:
    """Parse a diagram document and bind its geometry."""
    return GeometryBinding(parse_diagram(document))
