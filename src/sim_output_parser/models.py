"""
Data models for parsed simulation output.
"""

import math
from dataclasses import dataclass, field
from typing import List

import numpy as np


@dataclass
class Column:
    """One signal of an output table.

    ``values`` holds every sample seen since the column first appeared, which
    happened at row ``start_row``. In streaming mode ``values`` stays empty and
    ``value`` carries the sample from the current row.
    """
    header: str = ""
    index: int = 0  # Spike raster row; only meaningful when header is numeric
    values: List[float] = field(default_factory=list)
    value: float = 0.0
    start_row: int = 0
    text_width: int = 0
    minimum: float = math.inf
    maximum: float = -math.inf
    range: float = 0.0

    def compute_stats(self) -> None:
        """Compute minimum, maximum and range over the finite samples.

        Infinities and NaNs are skipped. A column without any finite sample
        gets all three statistics set to 0.
        """
        samples = self.to_numpy()
        finite = samples[np.isfinite(samples)]
        if finite.size == 0:
            self.minimum = 0.0
            self.maximum = 0.0
            self.range = 0.0
            return
        self.minimum = float(finite.min())
        self.maximum = float(finite.max())
        self.range = self.maximum - self.minimum

    def get(self, row: int = -1, default_value: float = 0.0) -> float:
        """Get the sample at an absolute row number.

        Args:
            row: Zero-based row in the owning table; negative means the
                most recently parsed value
            default_value: Returned for rows this column holds no sample for

        Returns:
            Sample value or default_value
        """
        if row < 0:
            return self.value
        row -= self.start_row
        if row < 0 or row >= len(self.values):
            return default_value
        return self.values[row]

    def to_numpy(self) -> np.ndarray:
        """Get stored samples as a float32 array."""
        return np.asarray(self.values, dtype=np.float32)


@dataclass
class RasterEvent:
    """A single spike in a raster plot."""
    time: float
    index: int
    column: str
