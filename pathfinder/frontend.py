"""Line-based menu for the campus path finder.

The menu offers four commands: load a DOT file, show dataset statistics,
find the shortest path between two buildings, and exit. Input and output
functions are injected so the loop can be driven from tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from .domain.errors import (
    GraphLoadError,
    InvalidWeightError,
    NoPathFoundError,
    UnknownNodeError,
)
from .domain.models import ShortestPathResult
from .services.navigator import CampusNavigator

logger = logging.getLogger(__name__)

MENU = "1: Load File\n2: Show Data Stats\n3: Find Shortest Path\n4: Exit App"


class Frontend:
    """Interactive menu driving a CampusNavigator."""

    def __init__(
        self,
        navigator: CampusNavigator,
        input_fn: Optional[Callable[[], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.navigator = navigator
        self._input = input_fn or input
        self._output = output_fn or print
        self.running = True

    def _read(self) -> str:
        try:
            return self._input()
        except EOFError:
            self.running = False
            return ""

    def start_main_menu(self) -> None:
        self._output("Welcome to UW Path Finder!")

        while self.running:
            self._output("\nPlease Select an Option Below!")
            self._output(MENU)

            choice = self._read().strip()
            if not self.running:
                break

            if choice == "1":
                self._output("\nPlease type file path: ")
                self.read_load_data(self._read().strip())
            elif choice == "2":
                self.show_stats()
            elif choice == "3":
                self.handle_shortest_path_request()
            elif choice == "4":
                self.exit_app()
            else:
                self._output("\nInvalid input, please select a valid command.")

    def read_load_data(self, file_path: Union[str, Path]) -> bool:
        """Load a DOT file, reporting success or failure to the user."""
        try:
            self.navigator.read_data_from_file(file_path)
        except GraphLoadError as e:
            logger.debug("Load failed", extra={"error": str(e)})
            if isinstance(e.cause, OSError):
                self._output(
                    "\nFile not found, invalid path. Please input a valid file path."
                )
            else:
                self._output(f"\nCould not read {file_path}: {e.message}")
            return False
        except InvalidWeightError as e:
            self._output(f"\nCould not read {file_path}: {e.message}")
            return False

        self._output(f"\nLoading {file_path}")
        self._output("Success!")
        return True

    def show_stats(self) -> None:
        self._output("\nCampus Statistics:")
        self._output("------------------")
        self._output(self.navigator.get_dataset_stats().format())

    def handle_shortest_path_request(self) -> None:
        """Ask for two buildings and print the shortest walk between them."""
        self._output("\nEnter initial destination: ")
        start = self._read().replace('"', "").strip()
        self._output("Enter final destination: ")
        end = self._read().replace('"', "").strip()

        try:
            result = self.navigator.get_shortest_path(start, end)
        except UnknownNodeError:
            self._output(
                "\nInvalid building names. Please select new locations and try again."
            )
            return
        except NoPathFoundError:
            self._output(
                f"\nNo path exists from {start} to {end}. "
                "Please select new locations and try again."
            )
            return

        self._output(format_result(result, start, end))

    def exit_app(self) -> None:
        self.running = False
        self._output("\nExiting app. Thank you for using UW Path Finder!")


def format_result(result: ShortestPathResult, start: str, end: str) -> str:
    """Render a shortest path as the multi-line walking directions."""
    lines = [
        f"\nList of buildings from {start} to {end}:",
        " --> ".join(str(node) for node in result.path),
        f"\nHere's the walking time for each segment from {start} to {end}.\n",
    ]
    for source, target, cost in result.segments:
        lines.append(f"{source} to {target}: {cost} seconds.")
    lines.append(
        f"\nIt will take you {result.total_cost} seconds to get from {start} to {end}."
    )
    return "\n".join(lines)
