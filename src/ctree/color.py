"""Terminal colors and the light palette."""

import random
from dataclasses import dataclass

ESC = "\x1b"


@dataclass(frozen=True)
class Color:
    """A 24-bit terminal foreground color."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel!r}")

    def to_ansi(self) -> str:
        return f"{ESC}[38;2;{self.r};{self.g};{self.b}m"

    def reset(self) -> str:
        return f"{ESC}[0m"

    def format(self, glyph: str) -> str:
        """Wrap ``glyph`` in this color and a trailing reset."""
        return f"{self.to_ansi()}{glyph}{self.reset()}"


YELLOW = Color(255, 255, 0)
GREEN = Color(0, 255, 0)
BROWN = Color(210, 105, 30)
WHITE = Color(255, 255, 255)

PINK = Color(247, 108, 246)
LIGHT_BLUE = Color(85, 202, 255)
PURPLE = Color(100, 0, 255)
RED = Color(236, 21, 0)
ORANGE = Color(243, 213, 0)
LIGHT_GREEN = Color(100, 255, 24)

LIGHT_PALETTE = (PINK, LIGHT_BLUE, PURPLE, RED, ORANGE, LIGHT_GREEN)


def random_light_color(rng=None) -> Color:
    """Pick a light color uniformly; ``rng`` only needs a ``randrange`` method."""
    if rng is None:
        rng = random
    index = rng.randrange(len(LIGHT_PALETTE))
    if 0 <= index < len(LIGHT_PALETTE):
        return LIGHT_PALETTE[index]
    return WHITE
