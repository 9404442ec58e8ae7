[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golubrun"
version = "0.1.0"
description = "A small pixel-art arcade game shell with an animated sprite-sheet introduction, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pixel-art", "pygame", "sprite-sheet", "introduction"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
golubrun = "golubrun.app:main"

[tool.hatch.build.targets.wheel]
packages = ["golubrun"]

[tool.pytest.ini_options]
addopts = "-ra"
