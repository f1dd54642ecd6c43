[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motoracer"
version = "0.1.0"
description = "A two-player top-down motorbike racing game on a tile-based circuit"
requires-python = ">=3.10"
keywords = ["game", "racing", "arcade", "pygame", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
motoracer = "motoracer.game:main"

[tool.hatch.build.targets.wheel]
packages = ["motoracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
