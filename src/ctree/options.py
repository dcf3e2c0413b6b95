"""Default tree options, merging and validation."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

LOG = logging.getLogger(__name__)

DEFAULT_STAR = {
    "TOP": "|",
    "TREE_STAR": "+",
    "LEFT": "-",
    "RIGHT": "-",
    "BOTTOM": "A",
}

DEFAULT_OPTIONS = {
    "star": DEFAULT_STAR,
    "balls": "O",
    "stars": "*",
}


class InvalidOptionType(TypeError):
    """An option value that should be text is something else."""

    def __init__(self, key_path: str, value: Any):
        self.key_path = key_path
        self.actual_type = type(value).__name__
        super().__init__(
            f"Invalid value for {key_path}: expected a string but got {self.actual_type}"
        )


@dataclass(frozen=True)
class TreeOptions:
    star: Mapping[str, str]
    balls: str
    stars: str


def merge_options(new_options: Optional[Mapping[str, Any]] = None) -> TreeOptions:
    """
    Overlay caller options on the defaults and validate them.

    The overlay is shallow: a caller-supplied ``star`` group replaces the whole
    default group, so any star key it leaves out stays unset. A plain string for
    ``star`` is used at every star position; a group given for ``balls`` or
    ``stars`` is joined into one glyph.

    Raises:
        InvalidOptionType: if any leaf value is not a string.
    """
    if new_options is None:
        new_options = {}
    if not isinstance(new_options, Mapping):
        raise InvalidOptionType("options", new_options)

    merged = {**DEFAULT_OPTIONS, **new_options}

    for key, value in merged.items():
        if isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                if not isinstance(sub_value, str):
                    raise InvalidOptionType(f"{key}.{sub_key}", sub_value)
        elif not isinstance(value, str):
            raise InvalidOptionType(key, value)

    unknown = sorted(set(merged) - set(DEFAULT_OPTIONS))
    if unknown:
        LOG.debug("Ignoring unknown options: %s", ", ".join(unknown))

    return TreeOptions(
        star=MappingProxyType(_star_group(merged["star"])),
        balls=_glyph(merged["balls"]),
        stars=_glyph(merged["stars"]),
    )


def _star_group(value):
    # a single glyph stands for every star position
    if isinstance(value, Mapping):
        return dict(value)
    return {key: value for key in DEFAULT_STAR}


def _glyph(value) -> str:
    # a group of glyphs is drawn as one glyph, in order
    if isinstance(value, Mapping):
        return "".join(value.values())
    return value
