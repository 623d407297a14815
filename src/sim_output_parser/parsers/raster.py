"""
Spike raster extraction from parsed output tables.

In a spike raster file each column is one neuron, named by its integer index,
and a non-zero sample marks a spike at that row. These helpers operate on an
OutputParser after parse() has loaded it.
"""

import logging
from typing import List

import numpy as np

from sim_output_parser.models import Column, RasterEvent
from sim_output_parser.parsers.output_parser import OutputParser

logger = logging.getLogger(__name__)


def _is_time(parser: OutputParser, column: Column) -> bool:
    return parser.time_found and column is parser.time


def assign_raster_indices(parser: OutputParser) -> None:
    """Set Column.index for every column of a parsed table.

    Raw tables number their non-time columns sequentially. Otherwise the
    header is read as an integer, and columns with non-integer headers get
    -1, -2, ... in order.
    """
    if parser.raw:
        i = 0
        for column in parser.columns:
            if not _is_time(parser, column):
                column.index = i
                i += 1
        return

    next_column = -1
    for column in parser.columns:
        try:
            column.index = int(column.header)
        except ValueError:
            column.index = next_column
            next_column -= 1


def raster_events(parser: OutputParser) -> List[RasterEvent]:
    """Collect spikes from every non-time column.

    Args:
        parser: Table loaded with parse(); indices should already be assigned

    Returns:
        Events in column order, then row order. Event time comes from the time
        column when one was found by name, otherwise it is the row number.
    """
    events = []
    for column in parser.columns:
        if _is_time(parser, column):
            continue
        for r in np.flatnonzero(column.to_numpy()):
            row = int(r) + column.start_row
            if parser.time_found:
                t = parser.time.get(row, parser.default_value)
            else:
                t = float(row)
            events.append(RasterEvent(time=t, index=column.index, column=column.header))
    logger.debug(f"Extracted {len(events):,} raster events")
    return events


def time_quantum(parser: OutputParser) -> float:
    """Find the closest spacing between two spikes on a single raster row.

    Time steps smaller than the average spacing per recorded sample are
    ignored, since they usually come from jitter around event delivery.
    The result never exceeds 1.
    """
    quantum = 1.0
    time = parser.time
    if not parser.time_found or time is None or len(time.values) < 2:
        return quantum

    total_count = sum(len(c.values) for c in parser.columns if c is not time)
    if total_count == 0:
        return quantum

    values = time.values
    min_quantum = (values[-1] - values[0]) / total_count
    for previous, current in zip(values, values[1:]):
        diff = current - previous
        if diff >= min_quantum:
            quantum = min(quantum, diff)
    return quantum
