#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="hostbridge",
    version="0.1.0",
    description="Value marshalling between a dynamic vector-oriented host runtime and typed native functions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"hostbridge": ["config.json5"]},
    python_requires=">=3.10",
    install_requires=[
        "json5",
        "PyYAML",
    ],
    extras_require={
        "dev": ["pytest", "black", "mypy"],
    },
)
