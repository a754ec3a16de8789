#!/usr/bin/env python3
"""
Setup script for biolines - Unix-style line tools for sequence files
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="biolines",
    version="0.1.0",
    author="biolines Contributors",
    description="Unix-style join, head, tail, grep and wc for biological sequence files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "rich>=12.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "bljoin=biolines.cli:join_main",
            "blhead=biolines.cli:head_main",
            "bltail=biolines.cli:tail_main",
            "blgrep=biolines.cli:grep_main",
            "blwc=biolines.cli:wc_main",
        ],
    },
)
