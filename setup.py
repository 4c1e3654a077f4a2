"""
setup.py

Сборка пакета Peg Solitaire Solver.

Использование:
    pip install -e .            # установка для разработки
    pip install -e .[test]      # вместе с pytest
"""

from setuptools import setup

setup(
    name="peg_solitaire",
    version="1.0.0",
    description="Peg Solitaire Solver (English cross board)",
    packages=["core", "solvers", "solutions", "peg_io", "utils"],
    py_modules=["main"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-solitaire=main:main",
        ],
    },
    zip_safe=False,
)
