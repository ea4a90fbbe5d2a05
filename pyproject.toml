[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazecaster"
version = "0.1.0"
description = "A small raycasting maze explorer with a software framebuffer and a top-down map view"
requires-python = ">=3.10"
keywords = ["raycaster", "maze", "game", "pygame", "framebuffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazecaster = "mazecaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazecaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
