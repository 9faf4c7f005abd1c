[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "intuitive"
version = "0.1.0"
description = "Declarative component trees for terminal user interfaces: stacks, text, buttons, lists, tables, scroll views, spinners, toasts, input events and easing animations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tui",
    "terminal",
    "declarative",
    "ui",
    "components",
    "animation",
    "easing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["intuitive"]

[tool.hatch.build.targets.sdist]
include = ["intuitive", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
