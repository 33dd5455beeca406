[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gates_of_eras"
version = "0.1.0"
description = "A pygame tile-map game with a launcher window for choosing the display and fullscreen mode."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "strategy", "tilemap", "pygame"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gates-of-eras = "gates_of_eras.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gates_of_eras"]

[tool.pytest.ini_options]
addopts = "-ra"
