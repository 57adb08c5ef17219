[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physim"
version = "0.1.0"
description = "A small 2D physics sandbox: bouncing balls, a controllable player block and a hoop on the right edge of the window."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "game", "collision", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
physim = "physim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["physim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
