[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evansengine"
version = "0.1.0"
description = "A small top-down sprite game: a hunter walks around a field with an idle zombie and a gem drawn on the ground."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "sprite", "animation", "top-down"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
evansengine = "evansengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["evansengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
