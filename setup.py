#!/usr/bin/env python3
"""Setup script for floorroute."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
if readme_file.exists():
    with open(readme_file, "r", encoding="utf-8") as f:
        long_description = f.read()
else:
    long_description = "Obstacle-aware shortest routes for mobile agents on a grid floor"

setup(
    name="floorroute",
    version="1.0.0",
    author="floorroute Team",
    description="Obstacle-aware shortest routes for mobile agents on a grid floor",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["floorroute", "floorroute.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
            "pytest-cov>=2.0.0",
        ],
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.0.0",
            "black>=21.0.0",
            "flake8>=3.8.0",
            "mypy>=0.800",
        ],
    },
    zip_safe=False,
)
