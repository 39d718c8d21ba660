"""Command-line entry point: ``python -m pathfinder [dot_file]``.

Starts the interactive menu. When a DOT file is given, or when the
configured default file exists, it is loaded before the menu opens.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import get_config
from .container import get_container
from .frontend import Frontend
from .services import CampusNavigator


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pathfinder", description="Find the shortest walk between campus buildings."
    )
    parser.add_argument("dot_file", nargs="?", help="DOT file to load on start-up")
    args = parser.parse_args(argv)

    config = get_config()
    logging.basicConfig(
        level=config.observability.level,
        format=config.observability.format,
    )

    navigator = get_container().resolve(CampusNavigator)
    frontend = Frontend(navigator)

    if args.dot_file:
        frontend.read_load_data(args.dot_file)
    elif config.graph.dot_path.is_file():
        frontend.read_load_data(config.graph.dot_path)

    frontend.start_main_menu()


if __name__ == "__main__":
    main()
