"""Constants for ticket generation."""

# Distance to Mars used for every trip
DISTANCE_KM = 62_100_000

# Cruise speed range, km/s (both ends inclusive)
SPEED_MIN_KM_S = 16
SPEED_MAX_KM_S = 30

SECONDS_PER_DAY = 86_400

# Millions of USD added to the speed to get a one-way price
BASE_PRICE_MILLIONS = 20.0

DEFAULT_ROW_COUNT = 10

CARRIERS = ("Space Adventures", "SpaceX", "Virgin Galactic")

ONE_WAY = "One-way"
ROUND_TRIP = "Round-trip"
