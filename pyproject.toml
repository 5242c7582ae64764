[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neurovis"
version = "0.1.0"
description = "A small feed-forward neural network with a live decision-boundary visualizer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["neural network", "backpropagation", "visualization", "classification", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
neurovis = "neurovis.visualizer:main"

[tool.hatch.build.targets.wheel]
packages = ["neurovis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
