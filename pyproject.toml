[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unitcalc"
version = "0.1.0"
description = "Small calculators: combinations and arrangements, and physical unit conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "conversion", "combinatorics", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unitcalc-combinatorics = "unitcalc.combinatorics:main"
unitcalc-convert = "unitcalc.converter:main"

[tool.hatch.build.targets.wheel]
packages = ["unitcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
