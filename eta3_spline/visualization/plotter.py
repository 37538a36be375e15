"""Static plots of eta-3 spline curves."""

import os
import numpy as np
import matplotlib

# Non-GUI backend unless the caller picked one
if os.environ.get("MPLBACKEND") is None:
    matplotlib.use("Agg")

import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional, Tuple, Union
from loguru import logger

from ..core.data_structures import MotionState
from ..core.polynomial import Curve


def plot_curve(
    curve: Curve,
    output_path: Union[str, Path],
    num_pts: int = 100,
    start: Optional[MotionState] = None,
    end: Optional[MotionState] = None,
    show_headings: bool = True,
    figsize: Tuple[float, float] = (8, 8),
    dpi: int = 100,
    curve_color: str = 'blue',
    pose_color: str = 'red',
) -> Path:
    """Plot a rendered curve and save it as an image.

    Args:
        curve: Curve to plot
        output_path: Image file to write
        num_pts: Number of samples drawn
        start: Optional start pose, marked on the plot
        end: Optional end pose, marked on the plot
        show_headings: Draw heading arrows at the supplied poses
        figsize: Figure size (width, height) in inches
        dpi: Dots per inch
        curve_color: Line color of the curve
        pose_color: Marker color of the poses

    Returns:
        Path of the saved image
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    pts = curve.to_array(num_pts)

    fig, ax = plt.subplots(figsize=figsize)
    try:
        ax.plot(pts[:, 0], pts[:, 1], '-', color=curve_color, linewidth=2, label='eta-3 spline')

        poses = [(p, name) for p, name in ((start, 'start'), (end, 'end')) if p is not None]
        if poses:
            span = (pts.max(axis=0) - pts.min(axis=0)).max()
            arrow_len = 0.1 * (span if span > 0 else 1.0)
            for pose, name in poses:
                ax.plot(pose.x, pose.y, 'o', color=pose_color)
                ax.annotate(name, (pose.x, pose.y), textcoords='offset points', xytext=(5, 5))
                if show_headings:
                    ax.arrow(
                        pose.x, pose.y,
                        arrow_len * np.cos(pose.t), arrow_len * np.sin(pose.t),
                        head_width=0.3 * arrow_len, color=pose_color, length_includes_head=True
                    )

        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.set_title('Eta-3 Spline')
        ax.set_aspect('equal', adjustable='datalim')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='best')

        fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
    finally:
        plt.close(fig)

    logger.info(f"Curve plot saved to {output_path}")
    return output_path
