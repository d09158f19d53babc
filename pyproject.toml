[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerkit"
version = "0.1.0"
description = "Small maths, parsing, puzzle and rendering tools: complex numbers, quaternions, a sudoku solver, protobuf and PNG readers, and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "complex",
    "quaternion",
    "matrix",
    "fourier",
    "sudoku",
    "protobuf",
    "png",
    "ppm",
    "fibonacci",
    "pell",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerkit-png = "tinkerkit.png:main"
tinkerkit-gradient = "tinkerkit.raytrace:main"
tinkerkit-euler = "tinkerkit.euler:main"
tinkerkit-hello = "tinkerkit.homefile:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
