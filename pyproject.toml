[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpixel"
version = "0.1.0"
description = "Line-based pixel processing building blocks: pixel formats, ring buffers, pipeline operations and command-line argument parsing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "image",
    "pixel",
    "fourcc",
    "pixel-format",
    "ring-buffer",
    "pipeline",
    "bayer",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mpixel"]

[tool.hatch.build.targets.sdist]
include = ["mpixel", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
