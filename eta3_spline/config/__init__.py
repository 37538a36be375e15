"""Configuration management module."""

import yaml
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass, asdict
from loguru import logger

from ..core.data_structures import EtaParam, MotionState


@dataclass
class Eta3Config:
    """Parameters of one eta-3 spline scenario.

    The start pose sits at the origin; everything else is configurable.

    Attributes:
        # End position
        x: End X position
        y: End Y position

        # Boundary headings, curvatures and curvature rates
        t1: Start heading [rad]
        t2: End heading [rad]
        k1: Start curvature [1/m]
        k2: End curvature [1/m]
        dk1: Start curvature rate [1/m²]
        dk2: End curvature rate [1/m²]

        # Shape parameters
        eta1 .. eta6: Eta vector, eta1 and eta2 must be positive

        # Output
        num_pts: Number of rendered samples
        output_path: CSV file receiving the rendered points
        plot_path: Optional image file for a plot of the curve
    """
    # End position
    x: float = 1.0
    y: float = 1.0

    # Headings
    t1: float = 0.0
    t2: float = 0.0

    # Curvatures
    k1: float = 0.0
    k2: float = 0.0
    dk1: float = 0.0
    dk2: float = 0.0

    # Eta vector
    eta1: float = 2.0
    eta2: float = 2.0
    eta3: float = 0.0
    eta4: float = 0.0
    eta5: float = 0.0
    eta6: float = 0.0

    # Output
    num_pts: int = 100
    output_path: str = 'eta3.csv'
    plot_path: Optional[str] = None

    # Internal: loaded from
    config_path: Optional[str] = None

    def start_state(self) -> MotionState:
        """Start pose at the origin."""
        return MotionState(x=0.0, y=0.0, t=self.t1, k=self.k1, dk=self.dk1)

    def end_state(self) -> MotionState:
        return MotionState(x=self.x, y=self.y, t=self.t2, k=self.k2, dk=self.dk2)

    def eta_param(self) -> EtaParam:
        return EtaParam(self.eta1, self.eta2, self.eta3, self.eta4, self.eta5, self.eta6)


class ConfigValidationError(ValueError):
    """Raised when configuration validation fails."""
    pass


def validate_config(config: Eta3Config) -> None:
    """Validate configuration values for consistency and correctness.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    errors: List[str] = []

    # Numeric fields
    numeric_fields = (
        'x', 'y', 't1', 't2', 'k1', 'k2', 'dk1', 'dk2',
        'eta1', 'eta2', 'eta3', 'eta4', 'eta5', 'eta6',
    )
    non_numeric = set()
    for name in numeric_fields:
        value = getattr(config, name)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            errors.append(f"{name} must be a number, got {value!r}")
            non_numeric.add(name)

    # Eta vector, same guard as EtaParam so NaN is rejected
    if 'eta1' not in non_numeric and not config.eta1 > 0:
        errors.append(f"eta1 must be positive, got {config.eta1}")
    if 'eta2' not in non_numeric and not config.eta2 > 0:
        errors.append(f"eta2 must be positive, got {config.eta2}")

    # Output
    if not isinstance(config.num_pts, int) or isinstance(config.num_pts, bool):
        errors.append(f"num_pts must be an integer, got {config.num_pts!r}")
    elif config.num_pts <= 0:
        errors.append(f"num_pts must be positive, got {config.num_pts}")
    if not isinstance(config.output_path, str) or not config.output_path:
        errors.append(f"output_path must be a non-empty string, got {config.output_path!r}")
    if config.plot_path is not None and not isinstance(config.plot_path, str):
        errors.append(f"plot_path must be a string, got {config.plot_path!r}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigValidationError(error_msg)


def load_config(config_path: str) -> Eta3Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Loaded configuration
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {config_path}: {e}") from e

    if config_dict is None:
        raise ValueError(f"YAML file {config_path} is empty or contains no valid content")

    try:
        config = Eta3Config(**config_dict)
    except TypeError as e:
        raise ValueError(f"Invalid configuration structure in {config_path}: {e}") from e

    config.config_path = str(config_path)

    try:
        validate_config(config)
    except ConfigValidationError:
        logger.error(f"Configuration validation failed for {config_path}")
        raise

    logger.info(f"Configuration loaded and validated from {config_path}")

    return config


def save_config(config: Eta3Config, config_path: str):
    """Save configuration to YAML file.

    Args:
        config: Configuration to save
        config_path: Path to save YAML file
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = asdict(config)
    config_dict.pop('config_path')

    with open(config_path, 'w') as f:
        yaml.safe_dump(config_dict, f, default_flow_style=False, indent=2)

    logger.info(f"Configuration saved to {config_path}")
