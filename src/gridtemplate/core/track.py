"""Track size specifications for grid rows and columns."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Fixed:
    """A track with a fixed extent in logical pixels."""

    pixels: float

    def __str__(self) -> str:
        return f"{self.pixels:g}px"


@dataclass(frozen=True)
class Flex:
    """A track taking a share of the space left after fixed tracks.

    The share is proportional to `factor` relative to the other flexible tracks.
    """

    factor: float = 1.0

    def __str__(self) -> str:
        return f"{self.factor:g}fr"


@dataclass(frozen=True)
class Content:
    """A track sized to its content.

    Intrinsic measurement is not performed: content tracks are resolved
    exactly like Flex(1.0).
    """

    def __str__(self) -> str:
        return "content"


TrackSize = Union[Fixed, Flex, Content]

# Weight given to Content tracks during flexible allocation
CONTENT_WEIGHT = 1.0

_FIXED_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)\s*(px)?$")
_FLEX_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)?\s*fr$")


def parse_track_size(value: TrackSize | str | int | float) -> TrackSize:
    """Parse a track size from its textual form.

    Accepted forms:
    - ``120``, ``120.5``, ``"120"`` or ``"120px"``: Fixed
    - ``"fr"`` or ``"2fr"``: Flex (factor defaults to 1)
    - ``"content"`` or ``"auto"``: Content

    Args:
        value: A track size instance, a number or a string

    Returns:
        The parsed track size

    Raises:
        ValueError: If the value is not a recognised track size
    """
    if isinstance(value, (Fixed, Flex, Content)):
        return value

    if isinstance(value, bool):
        raise ValueError(f"Invalid track size: {value!r}")

    if isinstance(value, (int, float)):
        return Fixed(float(value))

    if not isinstance(value, str):
        raise ValueError(f"Invalid track size: {value!r}")

    text = value.strip().lower()
    if text in ("content", "auto"):
        return Content()

    match = _FLEX_PATTERN.match(text)
    if match:
        factor = match.group(1)
        return Flex(float(factor) if factor is not None else 1.0)

    match = _FIXED_PATTERN.match(text)
    if match:
        return Fixed(float(match.group(1)))

    raise ValueError(f"Invalid track size: {value!r}")


def parse_track_sizes(values: list | tuple | None) -> tuple[TrackSize, ...]:
    """Parse a list of track sizes, see parse_track_size()."""
    if values is None:
        return ()
    if not isinstance(values, (list, tuple)):
        raise ValueError(f"Track sizes must be a list, got {values!r}")
    return tuple(parse_track_size(v) for v in values)
