[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cafrecord"
version = "3.12.0"
description = "Data model for Common Analysis File standard records: truth, beam, metadata and reconstruction branches."
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "neutrino", "analysis", "records", "reconstruction", "dataclasses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cafrecord"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
