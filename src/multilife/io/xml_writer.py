"""Write the final generation of a simulation as XML."""
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence, Union

from ..errors import InvalidInputError, OutputWritingError
from ..model import World

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def format_world(world: World, iterations: int = 0) -> str:
    """
    Render ``world`` as an output document.

    Organisms are listed by ``y``, then ``x``, so the output is stable
    regardless of the order cells were stored in.
    """
    root = ET.Element('life')
    world_element = ET.SubElement(root, 'world')
    ET.SubElement(world_element, 'cells').text = str(world.size.cells)
    ET.SubElement(world_element, 'species').text = str(world.species_count)
    ET.SubElement(world_element, 'iterations').text = str(iterations)

    organisms = ET.SubElement(root, 'organisms')
    for cell in world.sorted_cells():
        organism = ET.SubElement(organisms, 'organism')
        ET.SubElement(organism, 'x_pos').text = str(cell.coordinate.x)
        ET.SubElement(organism, 'y_pos').text = str(cell.coordinate.y)
        ET.SubElement(organism, 'species').text = str(cell.species.value)

    ET.indent(root, space='  ')
    return XML_DECLARATION + ET.tostring(root, encoding='unicode') + '\n'


def write_world(path: Union[str, Path], generations: Sequence[World]) -> None:
    """Write the last of ``generations`` to ``path``."""
    if not generations:
        raise InvalidInputError('No generations to write')
    document = format_world(generations[-1], iterations=len(generations) - 1)
    try:
        Path(path).write_text(document, encoding='utf-8')
    except OSError as exc:
        raise OutputWritingError(f"Writing XML file failed: {exc}") from exc
