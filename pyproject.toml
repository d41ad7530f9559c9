[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pktray"
version = "0.1.0"
description = "Interact with the PluralKit API from a small interactive text menu"
requires-python = ">=3.10"
keywords = ["pluralkit", "api", "client", "fronting", "switches"]
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
    "Topic :: Internet :: WWW/HTTP",
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
pktray = "pktray.tray:main"

[tool.hatch.build.targets.wheel]
packages = ["pktray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
