"""
Setup script for sempoa-trainer.

Sempoa Trainer teaches abacus (sempoa) mental arithmetic through a fixed
60-level curriculum of complement techniques:

1. Digit-pair classification - which technique a single-digit step needs
2. Question generation - random questions that exercise a technique
3. Progression - mastery-gated unlock chain across the curriculum

The 'sempoa' command is the terminal front-end.
"""

from setuptools import find_packages, setup

setup(
    name="sempoa-trainer",
    version="1.0.0",
    description="Abacus complement-technique trainer with a mastery-gated curriculum",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["sempoa", "sempoa.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Database
        "sqlalchemy>=2.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sempoa=sempoa.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="abacus sempoa soroban mental-arithmetic education cli",
)
