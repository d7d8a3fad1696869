"""
I/O Writers

Handles writing of layout results.
"""

from __future__ import annotations
from pathlib import Path
import logging

import pandas as pd

from ..layout import LayoutResult
from ..types import PathLike

logger = logging.getLogger(__name__)

LAYOUT_COLUMNS = ['feature', 'position', 'label', 'count', 'color', 'x', 'y', 'radius']


class LayoutTableWriter:
    """Writes lollipop placements and axis ticks as a TSV table"""

    @staticmethod
    def to_dataframe(layout: LayoutResult) -> pd.DataFrame:
        """
        Flatten a layout into one row per lollipop and axis tick

        Args:
            layout: Output of LayoutEngine.calculate_layout

        Returns:
            DataFrame with LAYOUT_COLUMNS
        """
        rows = []
        for pop in layout.lollipops:
            rows.append({
                'feature': 'lollipop',
                'position': pop.marker.position,
                'label': pop.marker.label,
                'count': pop.marker.count,
                'color': pop.marker.color,
                'x': round(pop.x, 3),
                'y': round(pop.top, 3),
                'radius': round(pop.radius, 3),
            })
        for tick in layout.axis_ticks:
            rows.append({
                'feature': 'axis_tick',
                'position': tick.position,
                'label': tick.text,
                'count': None,
                'color': None,
                'x': round(layout.x_for(tick.position), 3),
                'y': layout.axis_y,
                'radius': None,
            })
        return pd.DataFrame(rows, columns=LAYOUT_COLUMNS)

    @staticmethod
    def write(layout: LayoutResult, output_file: PathLike) -> None:
        """
        Write the layout table with size metadata

        Args:
            layout: Output of LayoutEngine.calculate_layout
            output_file: Path to output TSV file
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        table = LayoutTableWriter.to_dataframe(layout)
        with open(output_file, 'w') as f:
            f.write(f"# sequence_length={layout.length}\n")
            f.write(f"# width={layout.width:.3f}\n")
            f.write(f"# height={layout.height:.3f}\n")
            table.to_csv(f, sep='\t', index=False)
        logger.info(f"Layout table with {len(table)} rows saved to {output_file}")


def write_layout_table(layout: LayoutResult, output_file: PathLike) -> None:
    """
    Convenience function to write a layout table

    Args:
        layout: Output of LayoutEngine.calculate_layout
        output_file: Path to output TSV file
    """
    LayoutTableWriter.write(layout, output_file)
