"""XML input and output for simulations."""

from .xml_reader import read_simulation, parse_simulation, DUPLICATE_POLICIES
from .xml_writer import write_world, format_world

__all__ = [
    'read_simulation',
    'parse_simulation',
    'DUPLICATE_POLICIES',
    'write_world',
    'format_world',
]
