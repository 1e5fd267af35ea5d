[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boincview"
version = "0.1.0"
description = "Building blocks for a text-mode BOINC client monitor: config, RPC connection, message log, statistics and screen layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["boinc", "tui", "monitor", "distributed computing", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boincview"]

[tool.pytest.ini_options]
addopts = "-ra"
