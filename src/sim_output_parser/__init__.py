"""
Simulation output parser package.
"""

__version__ = "1.0.0"

from sim_output_parser.casting import parse_float, to_float32
from sim_output_parser.config_models import ReaderConfig
from sim_output_parser.models import Column, RasterEvent
from sim_output_parser.parsers.output_parser import OutputParser
from sim_output_parser.parsers.raster import assign_raster_indices, raster_events, time_quantum

__all__ = [
    "ReaderConfig",
    "OutputParser",
    "Column",
    "RasterEvent",
    "parse_float",
    "to_float32",
    "assign_raster_indices",
    "raster_events",
    "time_quantum",
]
