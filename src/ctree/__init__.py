"""ctree - a decorated ASCII tree with colored lights for the terminal."""

__version__ = "0.1.0"

"""
Expose lightweight lazy wrappers so that running ``python -m ctree.cli`` does
not find the submodule in `sys.modules` before execution.
"""


def render_tree(*args, **kwargs):
    from .tree import render_tree as _r

    return _r(*args, **kwargs)


def cli_main(*args, **kwargs):
    from .cli import main as _m

    return _m(*args, **kwargs)


__all__ = [
    "render_tree",
    "cli_main",
]
