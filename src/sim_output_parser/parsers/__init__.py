"""
Parsers for simulation output tables.
"""

from sim_output_parser.parsers.output_parser import OutputParser, is_header_line, split_fields
from sim_output_parser.parsers.raster import assign_raster_indices, raster_events, time_quantum

__all__ = [
    "OutputParser",
    "is_header_line",
    "split_fields",
    "assign_raster_indices",
    "raster_events",
    "time_quantum",
]
