"""Ticket table generator."""

import time
from typing import List, Optional
from spaceline.ir.ticket import GenerationParams, TicketRow
from spaceline.generation.arithmetic import ticket_price, trip_duration_days
from spaceline.generation.constants import ONE_WAY, ROUND_TRIP
from spaceline.generation.errors import InvalidArgumentError
from spaceline.generation.random_source import RandomSource
from spaceline.config.logging import get_logger

logger = get_logger(__name__)


def generate_row(rng: RandomSource, params: GenerationParams) -> TicketRow:
    """
    Generate one ticket.

    Draws happen in a fixed order: carrier, speed, then the round-trip coin.

    Args:
        rng: Random source to draw from
        params: Generation constants

    Returns:
        The generated TicketRow
    """
    carrier = params.carriers[rng.integer(0, len(params.carriers) - 1)]
    speed = rng.integer(params.speed_min, params.speed_max)
    round_trip = rng.integer(0, 1) == 1

    return TicketRow(
        carrier=carrier,
        duration_days=trip_duration_days(speed, params),
        trip_type=ROUND_TRIP if round_trip else ONE_WAY,
        price=ticket_price(speed, round_trip, params),
    )


def generate_table(
    row_count: Optional[int],
    rng: RandomSource,
    params: Optional[GenerationParams] = None,
) -> List[TicketRow]:
    """
    Generate row_count tickets sequentially from a single random source.

    Args:
        row_count: Number of rows (0 gives an empty table, None uses params.row_count)
        rng: Random source to draw from
        params: Generation constants (reference values when omitted)

    Returns:
        List of generated rows

    Raises:
        InvalidArgumentError: If row_count is negative; no draw is made
    """
    params = params or GenerationParams()
    if row_count is None:
        row_count = params.row_count
    if row_count < 0:
        raise InvalidArgumentError(f"row_count must be >= 0, got {row_count}")

    start = time.time()
    logger.debug(
        f"Generating {row_count} ticket row(s): "
        f"speed {params.speed_min}-{params.speed_max} km/s, "
        f"distance {params.distance_km:,} km"
    )
    rows = [generate_row(rng, params) for _ in range(row_count)]
    logger.info(f"Generated {len(rows)} ticket row(s) in {time.time() - start:.3f}s")
    return rows
