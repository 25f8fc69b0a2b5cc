"""Text and chart rendering of CSV previews and timing results."""

import logging
from pathlib import Path
from typing import Union

import matplotlib.pyplot as plt

from .config import BAR_COLOR, BEST_COLOR, CHART_DPI, CHART_FIGSIZE
from .core.measurement import ResultSet

logger = logging.getLogger(__name__)


def format_preview(rows: list[list[str]]) -> str:
    """Render preview rows as an aligned text table.

    The first row is treated as the header and underlined.
    """
    if not rows:
        return ""

    num_columns = max(len(row) for row in rows)
    padded = [row + [""] * (num_columns - len(row)) for row in rows]
    widths = [max(len(row[i]) for row in padded) for i in range(num_columns)]

    def render(row):
        return "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()

    lines = [render(padded[0]), "  ".join("-" * w for w in widths)]
    lines.extend(render(row) for row in padded[1:])
    return "\n".join(lines)


def format_results(result_set: ResultSet) -> str:
    """Render the results panel text for one analysis run."""
    lines = [f"Array size: {result_set.size:,} elements", ""]
    for measurement in result_set:
        lines.append(f"{measurement.name}: {measurement.duration_ns:,} ns")

    best = result_set.best
    lines.append("")
    lines.append(f"Best performing algorithm: {best.name} ({best.duration_ns:,} ns)")
    return "\n".join(lines)


def plot_results(result_set: ResultSet, output_file: Union[str, Path]) -> Path:
    """Save a horizontal bar chart of the measured durations.

    Args:
        result_set: Measurements to plot.
        output_file: Where to write the image; parent directories are created.

    Returns:
        The path the chart was written to.
    """
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    names = [m.name for m in result_set]
    durations_ms = [m.duration_ns / 1_000_000 for m in result_set]
    best_name = result_set.best.name
    colors = [BEST_COLOR if name == best_name else BAR_COLOR for name in names]

    fig, ax = plt.subplots(figsize=CHART_FIGSIZE)
    bars = ax.barh(names, durations_ms, color=colors)
    ax.invert_yaxis()
    ax.set_xlabel('Duration (ms)', fontsize=12)
    ax.set_title(f'Sorting Performance ({result_set.size:,} elements)',
                 fontsize=14, fontweight='bold')
    ax.grid(True, axis='x', alpha=0.3)
    ax.bar_label(bars, labels=[f"{d:.3f}" for d in durations_ms], padding=3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=CHART_DPI, bbox_inches='tight')
    plt.close(fig)

    logger.info("Plot saved to: %s", output_path)
    return output_path
