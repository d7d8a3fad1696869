"""I/O utilities for LollyPlot"""

from .readers import GraphicReader, UniProtReader, read_mutations
from .writers import LayoutTableWriter, write_layout_table

__all__ = [
    'GraphicReader',
    'UniProtReader',
    'read_mutations',
    'LayoutTableWriter',
    'write_layout_table',
]
