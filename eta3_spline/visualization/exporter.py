"""CSV export of rendered curve points."""

import csv
import os
import tempfile
import numpy as np
from pathlib import Path
from typing import Iterable, Tuple, Union
from loguru import logger

CSV_HEADER = ('x', 'y')


def export_points_csv(
    points: Iterable[Tuple[float, float]],
    output_path: Union[str, Path]
) -> Path:
    """Write points as two-column ``x,y`` rows with a header.

    The file is written next to the target and moved over it once complete,
    so a reader polling the file never sees a partial write.

    Args:
        points: (x, y) points, typically from ``Curve.render``
        output_path: Destination CSV file

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        dir=output_path.parent, prefix=f".{output_path.name}.", suffix='.tmp'
    )
    n_rows = 0
    try:
        with os.fdopen(fd, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for x, y in points:
                writer.writerow((x, y))
                n_rows += 1
        os.replace(tmp_name, output_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info(f"Saved {n_rows} points to {output_path}")
    return output_path


def load_points_csv(input_path: Union[str, Path]) -> np.ndarray:
    """Read a file written by ``export_points_csv``.

    Args:
        input_path: CSV file with an ``x,y`` header

    Returns:
        Points array [n_points, 2]
    """
    input_path = Path(input_path)
    with open(input_path, 'r', newline='') as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None or tuple(header) != CSV_HEADER:
            raise ValueError(f"Expected header {','.join(CSV_HEADER)} in {input_path}, got {header}")
        rows = [(float(x), float(y)) for x, y in reader]

    return np.array(rows, dtype=float).reshape(-1, 2)
