# SPDX-FileCopyrightText: 2025 shardkit contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="shardkit",
    version="0.1.0",
    description="Shamir's Secret Sharing over GF(2^8) for files and byte strings",
    author="shardkit contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
    ],
    extras_require={
        # testing
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "shardkit=shardkit.cli:main",
        ],
    },
)
