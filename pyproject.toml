[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ramla"
version = "0.1.0"
description = "A small resolution-independent UI engine with scriptable buttons, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "ui", "pygame", "buttons", "scaling"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ramla = "ramla.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ramla"]

[tool.pytest.ini_options]
addopts = "-ra"
