[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simkit"
version = "0.2.0"
description = "Similarity, distance, correlation and spectral entropy measures for vectors, sets and mass spectra"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["similarity", "distance", "correlation", "entropy", "statistics", "spectrum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
simkit-demo = "simkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["simkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
