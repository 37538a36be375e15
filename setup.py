"""Setup configuration for eta3_spline package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the contents of README file
ROOT = Path(__file__).parent
README = (ROOT / "README.md").read_text(encoding='utf-8')

setup(
    name="eta3_spline",
    version="0.1.0",
    description="Eta-3 spline generation for smooth motion planning paths",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["eta3_spline", "eta3_spline.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.23.0",
        "matplotlib>=3.5.0",
        "pyyaml>=6.0",
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
)
