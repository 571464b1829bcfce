"""
setup.py

Установка решателя треугольного Peg Solitaire.

Использование:
    pip install -e .[test]
    python main.py 4
"""

from setuptools import setup

setup(
    name="triangle_peg_solver",
    version="1.0.0",
    description="Game-tree DFS solver for the 15-hole triangle peg solitaire",
    packages=["core", "analysis", "solvers", "solutions", "peg_io", "utils"],
    py_modules=["main"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "triangle-peg-solver=main:main",
        ],
    },
    zip_safe=False,
)
