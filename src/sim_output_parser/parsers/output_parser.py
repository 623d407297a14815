"""
Reader for whitespace-delimited simulation output tables.

Each line of an output file is either a header row or a data row, decided by
its first character. Columns are created lazily as rows reveal them, so a file
may start without headers ("raw" mode) or grow new trailing columns midway.
Xyce PRN output is recognized by a leading "Index" column and an "End of"
trailer line.

Two modes are supported:
- Streaming: open() then next_row() repeatedly; only Column.value is kept.
- Bulk: parse() reads the whole file into Column.values.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

from sim_output_parser.casting import parse_float, to_float32
from sim_output_parser.config_models import ReaderConfig
from sim_output_parser.models import Column

logger = logging.getLogger(__name__)

XYCE_TERMINATOR = "End of"
XYCE_INDEX_HEADER = "Index"

_DATA_LEAD = frozenset("0123456789+-")
_DELIMITER = re.compile(r"[ \t]")


def is_header_line(line: str) -> bool:
    """Check whether a non-empty line is a header row.

    Only the first character is examined; a data row starts with a digit or sign.
    """
    return line[0] not in _DATA_LEAD


def split_fields(line: str) -> List[str]:
    """Split a line on single spaces or tabs.

    Adjacent delimiters yield empty fields. A delimiter at the end of the line
    does not create a trailing empty field.

    Args:
        line: Non-empty line without its line terminator

    Returns:
        List of field strings (never empty)
    """
    fields = _DELIMITER.split(line)
    if len(fields) > 1 and not fields[-1]:
        fields.pop()
    return fields


class OutputParser:
    """In-memory model of a simulation output table.

    Attributes:
        columns: Columns in left-to-right file order
        raw: True until any header row is seen
        is_xyce_prn: True if the first header is "Index"
        time: Column chosen as the time axis (set by parse)
        time_found: True if time was chosen by name rather than by position
        rows: Number of data rows read
        default_value: Fill value for gaps and out-of-range queries
    """

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.columns: List[Column] = []
        self.path: Optional[Path] = None
        self.raw = True
        self.is_xyce_prn = False
        self.time: Optional[Column] = None
        self.time_found = False
        self.rows = 0
        self.default_value = self.config.default_value
        self._in: Optional[TextIO] = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - releases the input file and columns."""
        self.close()
        return False

    @property
    def column_names(self) -> List[str]:
        """Headers of all columns, in order."""
        return [c.header for c in self.columns]

    def open(self, path: Union[str, Path]) -> None:
        """Open a file for reading row by row with next_row().

        Any previous file and columns are released first. Failure to open is
        not raised; next_row() will simply report end of data.
        """
        self.close()
        self.path = Path(path)
        self.raw = True  # Cleared once any header row is seen
        self.is_xyce_prn = False
        self.time = None
        self.time_found = False
        self.rows = 0

        try:
            self._in = open(self.path, 'r', encoding=self.config.encoding, errors='replace')
            logger.debug(f"Opened {self.path}")
        except OSError as e:
            logger.warning(f"Cannot open output file {self.path}: {e}")
            self._in = None

    def close(self) -> None:
        """Release the input file and all columns. Safe to call repeatedly."""
        self._release_input()
        self.columns.clear()
        self.time = None

    def _release_input(self) -> None:
        if self._in is not None:
            self._in.close()
            self._in = None

    def next_row(self) -> int:
        """Read the next data row.

        Header rows encountered along the way are absorbed into the column
        list and do not count as rows.

        Returns:
            Number of fields in the data row, or 0 at end of file, on a read
            error, or at a Xyce "End of" line
        """
        if self._in is None:
            return 0

        try:
            for line in self._in:
                line = line.rstrip('\r\n')
                if not line:
                    continue
                if line.startswith(XYCE_TERMINATOR):
                    break  # Xyce trailer is not a header

                fields = split_fields(line)
                if is_header_line(line):
                    self._read_headers(fields)
                    continue

                self._read_values(fields)
                self.rows += 1
                return len(fields)
        except OSError as e:
            logger.warning(f"Error reading {self.path}: {e}")

        self._release_input()
        return 0

    def _read_headers(self, fields: List[str]) -> None:
        self.raw = False
        # Existing headers are never overwritten
        for text in fields[len(self.columns):]:
            self.columns.append(Column(text))
        if not self.is_xyce_prn and self.columns[0].header == XYCE_INDEX_HEADER:
            self.is_xyce_prn = True
            logger.debug(f"{self.path} is Xyce PRN output")

    def _read_values(self, fields: List[str]) -> None:
        for c, text in enumerate(fields):
            if c == len(self.columns):
                self.columns.append(Column())
                if self.rows:
                    logger.debug(f"Column {c} first appears at row {self.rows}")
            column = self.columns[c]
            if not text:
                column.value = self.default_value
            else:
                column.text_width = max(column.text_width, len(text))
                column.value = to_float32(parse_float(text))

    def iter_rows(self) -> Iterator[int]:
        """Yield the field count of each remaining data row (streaming mode)."""
        while True:
            count = self.next_row()
            if not count:
                return
            yield count

    def parse(self, path: Union[str, Path], default_value: Optional[float] = None) -> None:
        """Read an entire file into memory.

        After all rows are loaded, empty headers are filled from the sidecar
        file, the time column is chosen, and the Xyce "Index" column is removed.

        Args:
            path: Output file to read
            default_value: Fill value for gaps; defaults to config.default_value
        """
        self.default_value = float(self.config.default_value if default_value is None else default_value)
        self.open(path)

        progress_interval = self.config.progress_interval
        for count in self.iter_rows():
            for c, column in enumerate(self.columns):
                if not column.values:
                    column.start_row = self.rows - 1
                if c < count:
                    column.values.append(column.value)
                else:
                    # The table is not sparse, so every column gets an entry for every row
                    column.values.append(self.default_value)

            if progress_interval > 0 and self.rows % progress_interval == 0:
                logger.info(f"[{self.path.name}] Processed {self.rows:,} rows")

        if not self.columns:
            logger.info(f"[{self.path.name}] No columns found")
            return

        self._read_sidecar()
        self._select_time()

        if self.is_xyce_prn:
            # Index is redundant with row number
            index_column = self.columns.pop(0)
            if self.time is index_column:
                self.time = self.columns[0] if self.columns else None

        logger.info(
            f"[{self.path.name}] Parsed {self.rows:,} rows, {len(self.columns)} columns"
            f"{' (Xyce PRN)' if self.is_xyce_prn else ''}"
        )

    def _read_sidecar(self) -> None:
        sidecar = Path(str(self.path) + self.config.sidecar_suffix)
        try:
            with open(sidecar, 'r', encoding=self.config.encoding, errors='replace') as f:
                names = [line.rstrip('\r\n') for line in f]
        except OSError:
            return

        logger.debug(f"Reading column names from {sidecar}")
        for column, name in zip(self.columns, names):
            if not column.header:
                column.header = name

    def _select_time(self) -> None:
        ranks = {name: rank for rank, name in enumerate(self.config.time_names, start=1)}
        self.time = self.columns[0]  # Fallback when no column is named as time
        best = 0
        for column in self.columns:
            rank = ranks.get(column.header, 0)
            if rank > best:
                best = rank
                self.time = column
                self.time_found = True
        if self.time_found:
            logger.debug(f"Time column is '{self.time.header}'")

    def get_column(self, name: str) -> Optional[Column]:
        """Find the first column with exactly the given header."""
        for column in self.columns:
            if column.header == name:
                return column
        return None

    def get(self, name: str, row: int = -1) -> float:
        """Get a sample by column name and absolute row.

        Returns default_value when the column is missing or has no sample at row.
        """
        column = self.get_column(name)
        if column is None:
            return self.default_value
        return column.get(row, self.default_value)

    def has_data(self) -> bool:
        return any(c.values for c in self.columns)

    def has_headers(self) -> bool:
        return any(c.header for c in self.columns)

    def dump(self, out: TextIO) -> None:
        """Write the table as tab-separated text.

        A header line is written if any column has a header, followed by all
        rows if any column has data.
        """
        if not self.columns:
            return

        if self.has_headers():
            out.write("\t".join(self.column_names) + "\n")

        if self.has_data():
            for r in range(self.rows):
                out.write("\t".join(
                    format_value(c.get(r, self.default_value)) for c in self.columns
                ) + "\n")


def format_value(value: float) -> str:
    """Format a sample with 6 significant digits, as C++ streams print floats."""
    return f"{value:g}"
