[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cchesstools"
version = "0.1.0"
description = "Chess engine tooling: UCI engine driver, opponent configs, STS benchmark parsing and engine-match reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "uci", "engine", "sts", "epd", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cchesstools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
