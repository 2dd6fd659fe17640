"""
setup.py

Установка Peg Solitaire Solver.

Использование:
    pip install -e .            # пакеты и команда peg-solver
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_backtrack_solver",
    version="1.0.0",
    description="Peg Solitaire backtracking solver with text, PNG and GIF output",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "Pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "peg-solver=main:main",
        ],
    },
    zip_safe=False,
)
