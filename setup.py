#!/usr/bin/env python3

"""Setup script for the SDF conversion package."""

from setuptools import setup, find_packages

setup(
    name="sdfconv",
    version="0.1.0",
    description="Convert SDF chemical table files to Cypher, RDF, markup and identity formats",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"sdfconv": ["data/*.json"]},
    install_requires=[
        "numpy>=1.20.0",
        "rdflib>=6.0.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "rdkit": ["rdkit>=2022.3.1"],
        "thrift": ["thrift>=0.16.0"],
        "all": ["rdkit>=2022.3.1", "thrift>=0.16.0"],
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "sdfconv=sdfconv.cli.convert:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
