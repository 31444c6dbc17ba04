# SPDX-FileCopyrightText: 2025 threshold-recovery contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="threshold-recovery",
    version="0.1.0",
    description="Threshold secret reconstruction with corrupted-share detection",
    author="threshold-recovery contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "threshold-recovery=threshold_recovery.cli:main",
        ],
    },
)
