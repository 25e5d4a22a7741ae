"""
Setup script for the Battle Pathfinder toolkit.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="battle-pathfinder",
    version="0.1.0",
    description="Grid pathfinding and battle simulation tools for turn-based tactical games",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Battle Pathfinder Team",
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.8",
    install_requires=[
        "rerun-sdk>=0.15.0",
        "numpy>=1.20.0",
        "pillow>=8.0.0",
        "scipy>=1.7.0",
        "tqdm>=4.60.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "battle-find-path=scripts.navigation.find_unit_path:main",
            "battle-simulate=scripts.battle.simulate_battle:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Games/Entertainment :: Turn Based Strategy",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
