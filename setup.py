"""
Setup configuration for the plantsim simulation engine.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="plantsim",
    version="1.0.0",
    author="Nuclear Sim Team",
    description="Bounded stochastic nuclear plant simulation engine for training dashboards",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["plantsim", "plantsim.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.19.0",
        "pydantic>=2.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.10",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
