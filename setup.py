#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="ccsubdiv",
    version="1.0.0",
    description="Catmull-Clark subdivision for quad meshes",
    author="DAFoam Team",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.4.0",
    ],
    extras_require={
        "meshio": ["meshio>=5.3.0"],
        "test": ["pytest", "meshio>=5.3.0"],
    },
    entry_points={
        "console_scripts": [
            "ccsubdiv=ccsubdiv.cli.app:main",
            "ccsubdiv-benchmark=ccsubdiv.utils.benchmark:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Visualization",
    ],
)
