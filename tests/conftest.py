"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


def write_output(path: Path, content: str) -> Path:
    """Write file content with exact line endings."""
    path.write_bytes(content.encode("utf-8"))
    return path


@pytest.fixture
def basic_file(tmp_path) -> Path:
    """Header row followed by three data rows."""
    return write_output(tmp_path / "basic.out", "t\tv\n0\t1.0\n1\t2.0\n2\t4.0\n")


@pytest.fixture
def raw_file(tmp_path) -> Path:
    """Data without any header row."""
    return write_output(tmp_path / "raw.out", "0\t1\n1\t2\n")


@pytest.fixture
def xyce_file(tmp_path) -> Path:
    """Xyce PRN output with Index column and trailer."""
    content = (
        "Index\tTIME\tV(1)\n"
        "0\t0.0\t1.0\n"
        "1\t1e-3\t1.5\n"
        "End of Xyce(TM) Simulation\n"
    )
    return write_output(tmp_path / "circuit.prn", content)


@pytest.fixture
def ragged_file(tmp_path) -> Path:
    """Second data row is missing its last field."""
    return write_output(tmp_path / "ragged.out", "a\tb\tc\n1\t2\t3\n4\t5\n")


@pytest.fixture
def late_column_file(tmp_path) -> Path:
    """Second data row adds a column."""
    return write_output(tmp_path / "late.out", "1\n2\t9\n")
