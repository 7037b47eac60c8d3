#!/usr/bin/python3
# Setup file for refnames
# Copyright (C) 2026 The refnames developers
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

from setuptools import setup

fuzzing_require = ["atheris"]


setup(
    name="refnames",
    version="0.1.0",
    description="Validation and normalization of git ref names",
    license="Apache-2.0 OR GPL-2.0-or-later",
    python_requires=">=3.10",
    packages=["refnames"],
    package_data={"": ["py.typed"]},
    extras_require={
        "fuzzing": fuzzing_require,
    },
    entry_points={
        "console_scripts": [
            "refnames=refnames.cli:_main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Topic :: Software Development :: Version Control",
    ],
)
