[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helmdash"
version = "0.1.0"
description = "Unit conversion, persistent settings, fault tables, event files and backlight stepping for a marine helm display"
requires-python = ">=3.10"
dependencies = []
keywords = ["marine", "helm", "units", "unit-conversion", "settings", "dashboard", "j1939"]
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
    "Topic :: Software Development :: Embedded Systems :: Controller Area Network (CAN) :: J1939",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["helmdash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
