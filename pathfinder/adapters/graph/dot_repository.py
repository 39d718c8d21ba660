"""DOT edge-list reader.

Reads campus data files in which every connection is one DOT edge line:

    "Memorial Union" -- "Science Hall" [seconds=105.8];

Lines without ``--`` (graph header, braces, node declarations) are
ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ...domain.errors import GraphLoadError
from ...domain.models import EdgeRecord

_EDGE_PATTERN = re.compile(
    r'^\s*"?(?P<source>[^"]+?)"?\s*--\s*"?(?P<target>[^"\[]+?)"?\s*'
    r"\[\s*seconds\s*=\s*(?P<seconds>[^\]\s]+)\s*\]\s*;?\s*$"
)


@dataclass
class DotEdgeRepository:
    """Edge source that parses DOT files.

    This adapter implements EdgeSourcePort.

    Attributes:
        encoding: Text encoding of the DOT files
    """

    encoding: str = "utf-8"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def read_edges(self, file_path: Union[str, Path]) -> List[EdgeRecord]:
        """Read every edge line of a DOT file.

        Args:
            file_path: Path to the DOT file.

        Returns:
            EdgeRecord for every edge line, in file order.

        Raises:
            GraphLoadError: If the file cannot be read or an edge line
                is malformed.
        """
        path = Path(file_path)
        self._logger.debug("Reading DOT file", extra={"file_path": str(path)})

        try:
            with path.open(encoding=self.encoding) as f:
                records = [
                    self.parse_line(line, line_number, str(path))
                    for line_number, line in enumerate(f, start=1)
                    if "--" in line
                ]
        except (OSError, UnicodeDecodeError) as e:
            raise GraphLoadError(
                f"Failed to read graph file {path}",
                cause=e,
                file_path=str(path),
            )

        self._logger.info(
            "DOT file read",
            extra={"file_path": str(path), "edges": len(records)},
        )
        return records

    @staticmethod
    def parse_line(
        line: str, line_number: int = 0, file_path: str = "<string>"
    ) -> EdgeRecord:
        """Parse a single DOT edge line.

        Raises:
            GraphLoadError: If the line is not a ``"A" -- "B" [seconds=N];``
                edge or the seconds value is not a number.
        """
        match = _EDGE_PATTERN.match(line)
        if match is None:
            raise GraphLoadError(
                f"Malformed edge line {line_number}: {line.strip()!r}",
                file_path=file_path,
                line_number=line_number,
            )

        try:
            seconds = float(match.group("seconds"))
        except ValueError as e:
            raise GraphLoadError(
                f"Invalid seconds value on line {line_number}",
                cause=e,
                file_path=file_path,
                line_number=line_number,
            )

        return EdgeRecord(
            source=match.group("source").strip(),
            target=match.group("target").strip(),
            weight=seconds,
        )
