#!/usr/bin/env python

from setuptools import setup

setup(
    name="bazelgen",
    version="0.1.0",
    packages=[
        "bazelgen",
        "bazelgen.details",
        "bazelgen.details.tools",
        "bazelgen.generators",
        "bazelgen.generators.bazel",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["bazelgen = bazelgen.__main__:main"]},
)
