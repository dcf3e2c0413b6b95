"""Render the colored tree: substitute placeholders, then colorize."""

import logging
import re
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .color import BROWN, GREEN, YELLOW, Color, random_light_color
from .options import TreeOptions, merge_options
from .template import (
    BALL_TOKEN,
    BROWN_GLYPHS,
    BROWN_PREFIX,
    GREEN_GLYPHS,
    GREEN_PREFIX,
    STAR_FILL_TOKEN,
    STAR_TOKENS,
    TREE_TEMPLATE,
    YELLOW_PREFIX,
)

LOG = logging.getLogger(__name__)

Rule = Tuple[str, str]


# =============================
# Substitution
# =============================


def check_rule_order(rules: Sequence[Rule]) -> None:
    """Reject a rule table where an earlier token would eat into a later one."""
    for i, (token, _) in enumerate(rules):
        for later, _ in rules[i + 1 :]:
            if token in later:
                raise ValueError(
                    f"token {token!r} is applied before {later!r}, which contains it"
                )


def check_distinct_tokens(tokens: Sequence[str]) -> None:
    """Reject a token set where one token occurs inside another."""
    for token in tokens:
        for other in tokens:
            if token != other and token in other:
                raise ValueError(f"token {token!r} occurs inside {other!r}")


def substitute(text: str, rules: Sequence[Rule]) -> str:
    """Apply each (token, replacement) rule in order as a global literal replace."""
    check_rule_order(rules)
    for token, replacement in rules:
        text = text.replace(token, replacement)
    return text


def star_rules(options: TreeOptions) -> List[Rule]:
    # Missing star keys get no rule; their tokens stay in the text.
    rules = [(STAR_TOKENS[key], options.star[key]) for key in STAR_TOKENS if key in options.star]
    ignored = [key for key in options.star if key not in STAR_TOKENS]
    if ignored:
        LOG.debug("Ignoring unknown star keys: %s", ", ".join(ignored))
    return rules


def fill_rules(options: TreeOptions) -> List[Rule]:
    return [(BALL_TOKEN, options.balls), (STAR_FILL_TOKEN, options.stars)]


# An unresolved star token must survive the fill pass intact.
check_distinct_tokens(list(STAR_TOKENS.values()) + [BALL_TOKEN, STAR_FILL_TOKEN])


# =============================
# Colorizing
# =============================


def colorize_lights(text: str, ball: str, rng=None) -> str:
    """Replace every light position with a randomly colored ball.

    A light position is a run of digits, optionally followed by the ball glyph.
    Each one draws its own color.
    """
    pattern = re.compile(r"\d+(?:%s)?" % re.escape(ball))
    return pattern.sub(lambda _match: random_light_color(rng).format(ball), text)


def colorize_glyphs(text: str, color: Color, prefix: str, glyphs: Iterable[str]) -> str:
    """Replace ``prefix + glyph`` with the colored glyph, one glyph at a time."""
    for glyph in glyphs:
        text = text.replace(prefix + glyph, color.format(glyph))
    return text


def yellow_glyphs(options: TreeOptions) -> List[str]:
    glyphs = [options.star[key] for key in STAR_TOKENS if key in options.star]
    glyphs.append(options.stars)
    return glyphs


def apply_colors(text: str, options: TreeOptions) -> str:
    text = colorize_glyphs(text, YELLOW, YELLOW_PREFIX, yellow_glyphs(options))
    text = colorize_glyphs(text, GREEN, GREEN_PREFIX, GREEN_GLYPHS)
    text = colorize_glyphs(text, BROWN, BROWN_PREFIX, BROWN_GLYPHS)
    return text


# =============================
# Entry point
# =============================


def render_tree(options: Optional[Mapping] = None, rng=None) -> str:
    """
    Render the decorated tree as text with 24-bit ANSI colors.

    Args:
        options: Optional overrides for ``star`` (TOP, TREE_STAR, LEFT, RIGHT,
            BOTTOM), ``balls`` and ``stars``. Merged shallowly over the defaults.
        rng: Light color source with a ``randrange`` method. Defaults to the
            ``random`` module.

    Returns:
        The finished picture, including line breaks.

    Raises:
        InvalidOptionType: if an option value is not a string.
    """
    opts = merge_options(options)
    LOG.debug(
        "Options: star=%s balls=%r stars=%r", dict(opts.star), opts.balls, opts.stars
    )

    text = substitute(TREE_TEMPLATE, star_rules(opts))
    text = substitute(text, fill_rules(opts))
    LOG.debug("Placeholders substituted")

    text = colorize_lights(text, opts.balls, rng)
    text = apply_colors(text, opts)
    LOG.debug("Rendered %d lines", text.count("\n"))
    return text
