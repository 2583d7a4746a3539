[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Classic numerical methods and CPU scheduling algorithms in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "root-finding",
    "interpolation",
    "integration",
    "ode",
    "linear-systems",
    "least-squares",
    "cpu-scheduling",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
addopts = "-ra"
