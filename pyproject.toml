[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokefetch"
version = "0.1.0"
description = "An interactive command-line explorer for Pokemon location areas backed by the PokeAPI"
requires-python = ">=3.10"
keywords = ["pokemon", "pokeapi", "repl", "cli", "location-area"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
pokefetch = "pokefetch.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["pokefetch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
