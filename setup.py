"""
Setup script for pysatl-sampling.

The package uses a ``src`` layout; test-only dependencies live in the
``test`` extra.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-sampling",
    version="0.0.1a0",
    description=(
        "Statistical distribution sampling engine and sample statistics "
        "for synthetic test-data generation"
    ),
    author="Leonid Elkin, Mikhail Mikhailov",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.26",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "scipy>=1.11",
        ],
    },
)
