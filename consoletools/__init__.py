"""consoletools: ANSI printing, token input, random and timing helpers,
plus a numbered terminal file picker.

Only ``main`` is re-exported here; it runs the picker CLI.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the file picker CLI; imported on call so helpers load without argparse."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
