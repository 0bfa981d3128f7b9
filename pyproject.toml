[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minineural"
version = "0.1.0"
description = "A small fully connected sigmoid neural network trained with mini-batch gradient descent."
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "backpropagation", "sigmoid", "gradient descent", "machine learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minineural = "minineural.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minineural"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
