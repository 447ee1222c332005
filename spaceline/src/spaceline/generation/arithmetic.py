"""Trip duration and price arithmetic."""

from spaceline.generation.errors import InvalidArgumentError
from spaceline.ir.ticket import GenerationParams


def truncating_div(a: int, b: int) -> int:
    """
    Integer division that truncates toward zero.

    Python's // floors, so -7 // 2 == -4 while truncation gives -3.

    Raises:
        ZeroDivisionError: If b is 0
    """
    if b == 0:
        raise ZeroDivisionError("truncating_div by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trip_duration_days(speed: int, params: GenerationParams) -> int:
    """
    Whole days needed to cover params.distance_km at speed km/s.

    The distance is divided by the speed first and the truncated seconds
    are then divided by the day length, truncating at each step.

    Raises:
        InvalidArgumentError: If speed is not positive
    """
    if speed <= 0:
        raise InvalidArgumentError(f"speed must be positive, got {speed}")
    seconds = truncating_div(params.distance_km, speed)
    return truncating_div(seconds, params.seconds_per_day)


def ticket_price(speed: int, round_trip: bool, params: GenerationParams) -> float:
    """Price in millions of USD; round trips cost double."""
    price = params.base_price + speed
    if round_trip:
        price = price * 2
    return float(price)
