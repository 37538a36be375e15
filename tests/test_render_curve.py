"""Tests for the render_curve example script."""

import importlib.util
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from eta3_spline.config import ConfigValidationError
from eta3_spline.visualization import load_points_csv

SCRIPT = Path(__file__).parent.parent / "examples" / "render_curve.py"


@pytest.fixture(scope="module")
def render_curve():
    spec = importlib.util.spec_from_file_location("render_curve", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _run(module, *args):
    with patch.object(sys, 'argv', ['render_curve.py', *args]):
        module.main()


def test_default_parameters(render_curve, tmp_path):
    output = tmp_path / "eta3.csv"
    _run(render_curve, '--output', str(output), '--log-level', 'ERROR')

    pts = load_points_csv(output)
    assert pts.shape == (100, 2)
    assert pts[0].tolist() == [0.0, 0.0]


def test_scenario_with_overrides(render_curve, tmp_path):
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text(yaml.safe_dump({
        'x': 10.0,
        'y': 5.0,
        't2': 3.14,
        'eta1': 10.0,
        'eta2': 5.0,
        'output_path': str(tmp_path / "ignored.csv"),
    }))
    output = tmp_path / "out.csv"
    plot = tmp_path / "out.png"

    _run(
        render_curve,
        '--config', str(scenario),
        '--num-pts', '20',
        '--output', str(output),
        '--plot', str(plot),
        '--log-level', 'ERROR',
    )

    assert load_points_csv(output).shape == (20, 2)
    assert plot.exists()
    assert not (tmp_path / "ignored.csv").exists()


@pytest.mark.parametrize("args", [
    ('--output', ''),
    ('--num-pts', '0'),
    ('--num-pts', '-3'),
])
def test_invalid_overrides_rejected(render_curve, tmp_path, monkeypatch, args):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ConfigValidationError):
        _run(render_curve, *args, '--log-level', 'ERROR')
    assert list(tmp_path.iterdir()) == []


def test_invalid_overrides_on_loaded_scenario(render_curve, tmp_path):
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("num_pts: 10\n")

    with pytest.raises(ConfigValidationError):
        _run(render_curve, '--config', str(scenario), '--num-pts', '0', '--log-level', 'ERROR')
