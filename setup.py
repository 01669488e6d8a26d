#!/usr/bin/env python3
"""
Build stfu8 as a Python package

The codec is pure Python.  hypothesis is only needed for the property tests,
and mypy checks the type comments.
"""
from setuptools import setup, find_packages

setup(
    name="stfu8",
    version="0.1.0",
    description="Sorta Text Format in UTF-8: binary data as readable text",
    packages=find_packages(include=["core", "stfu8_"]),
    python_requires=">=3.6",
    install_requires=[],
    extras_require={
        "test": ["hypothesis"],
        "dev": ["hypothesis", "mypy"],
    },
    scripts=["bin/stfu8.py"],
)
