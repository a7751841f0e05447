[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splinelab"
version = "0.1.0"
description = "Cubic spline interpolation of test functions, with coefficient tables, error tables and plots"
requires-python = ">=3.10"
keywords = [
    "spline",
    "cubic spline",
    "interpolation",
    "numerical methods",
    "tridiagonal",
    "sweep method",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
splinelab = "splinelab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["splinelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
