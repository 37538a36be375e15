"""Visualization and export of rendered curves."""

from .exporter import export_points_csv, load_points_csv
from .plotter import plot_curve

__all__ = ['export_points_csv', 'load_points_csv', 'plot_curve']
