#!/usr/bin/env python

"""The setup script."""

from packaging.requirements import Requirement
from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as readme_file:
    readme = readme_file.read()

with open("requirements.txt") as requirements_file:
    requirements = [
        str(Requirement(line))
        for line in (raw_line.split("#", 1)[0].strip() for raw_line in requirements_file)
        if line
    ]

short_description = (
    "Check batches of pairwise difference constraints (x_i - x_j = c) for consistency "
    "using a weighted Union-Find."
)

setup(
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    description=short_description,
    entry_points={
        "console_scripts": [
            "diff_constraints_check=diff_constraints.cli:check",
        ],
    },
    extras_require={
        "test": ["pytest", "mock", "packaging"],
    },
    install_requires=requirements,
    license="MIT license",
    long_description=readme,
    long_description_content_type="text/markdown",
    include_package_data=True,
    keywords="union find,disjoint set,difference constraints,consistency",
    name="diff-constraints",
    packages=find_packages(include=["diff_constraints", "diff_constraints.*"]),
    version="0.0.1",
    zip_safe=False,
)
