"""
Setup script for pysatl-lognormal.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-lognormal",
    version="0.1.0",
    description="Log-normal distribution library built on NumPy and SciPy",
    author="PySATL project",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
