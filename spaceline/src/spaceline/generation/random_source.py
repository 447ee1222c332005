"""Random sources for ticket generation."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np
from spaceline.generation.errors import InvalidArgumentError
from spaceline.config.logging import get_logger

logger = get_logger(__name__)


class RandomSource(ABC):
    """Base class for the random sources the generator draws from."""

    @abstractmethod
    def integer(self, low: int, high: int) -> int:
        """
        Draw one integer uniformly from the inclusive range [low, high].

        Args:
            low: Smallest value that can be drawn
            high: Largest value that can be drawn

        Returns:
            The drawn integer

        Raises:
            InvalidArgumentError: If low > high
        """
        pass


class NumpyRandomSource(RandomSource):
    """Random source backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the source.

        Args:
            seed: Seed for numpy.random.default_rng (None draws fresh entropy)
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        logger.debug(f"Initialized NumpyRandomSource (seed={seed})")

    def integer(self, low: int, high: int) -> int:
        if low > high:
            raise InvalidArgumentError(f"empty range: low ({low}) > high ({high})")
        return int(self.rng.integers(low, high, endpoint=True))
