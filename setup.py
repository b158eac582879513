"""Setup script for graph-hunter."""

from setuptools import setup, find_packages

setup(
    name="graph-hunter",
    version="0.1.0",
    description="Circular dependency and dead code detection for code dependency graphs",
    author="graph-hunter developers",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "networkx>=3.2.1",
        "pyyaml>=6.0.1",
        "python-dotenv>=1.0.0",
        "click>=8.1.7",
        "rich>=13.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.4",
        ]
    },
    entry_points={
        "console_scripts": [
            "graph-hunter=graph_hunter.cli:cli",
        ]
    },
)
