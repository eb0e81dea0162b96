"""
Abstract base class for the slab and wall calculators.

Input: raw form fields dict (numbers or strings, possibly missing)
Output: JSON-compatible result dict
"""

import logging
import math
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

DEFAULT_DIMENSION = 1.0


def apply_waste(quantity: float, waste_factor: float) -> int:
    """Apply waste factor to a quantity. Always round UP to next whole unit."""
    return math.ceil(quantity * (1 + waste_factor))


def round_half_up(value: float) -> int:
    """Nearest integer, .5 goes up (round() would send 2.5 to 2)."""
    return math.floor(value + 0.5)


def parse_number(value, default: float = 0.0) -> float:
    """Parse a numeric value from user input. Anything unparseable gives the default."""
    if value is None or isinstance(value, bool):
        return default
    text = str(value).strip()
    # float() also takes digit separators ("1_000"); form input never does
    if "_" in text:
        return default
    try:
        number = float(text)
    except (ValueError, TypeError):
        return default
    if not math.isfinite(number):
        return default
    return number


def parse_dimension(value, default: float = DEFAULT_DIMENSION) -> float:
    """
    Parse a plan dimension in meters.

    Zero, negative and non-numeric values fall back to the default instead of
    raising: the calculators are fed straight from form fields.
    """
    number = parse_number(value, default=default)
    if number <= 0:
        logger.debug("Dimension %r is not a positive number, using %s", value, default)
        return default
    return number


class BaseCalculator(ABC):
    """All calculators inherit from this."""

    job_type = ""

    @abstractmethod
    def calculate(self, fields: dict) -> dict:
        """
        Takes the raw form fields.
        Returns a JSON-compatible result dict.
        """
        pass

