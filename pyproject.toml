[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintkit"
version = "0.1.0"
description = "A small paint-style drawing toolkit: an in-memory window with toolbar, status bar, figure drawing and queued click and key input"
requires-python = ">=3.10"
keywords = ["paint", "drawing", "toolbar", "figures", "canvas", "pillow"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]
dependencies = ["pillow"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
paintkit-demo = "paintkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["paintkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
