# setup.py
from setuptools import setup, find_packages

setup(
    name="scribl",
    version="0.1.0",
    description="Evaluation core for the Scribl expression language",
    packages=find_packages(include=["scribl", "scribl.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "tree-sitter>=0.22",
    ],
    extras_require={
        "test": ["pytest>=7.0", "hypothesis>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "scribl = scribl.cli:cli",
        ],
    },
    zip_safe=False,
)
