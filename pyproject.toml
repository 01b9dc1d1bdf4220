[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcsbench"
version = "0.1.0"
description = "Longest common subsequence length by full-table, two-row and anti-diagonal dynamic programming"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lcs",
    "longest common subsequence",
    "dynamic programming",
    "anti-diagonal",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
lcsbench-seq = "lcsbench.sequential:main"
lcsbench-antidiagonal = "lcsbench.antidiagonal:main"

[tool.hatch.build.targets.wheel]
packages = ["lcsbench"]

[tool.pytest.ini_options]
addopts = "-ra"
