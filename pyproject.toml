[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bouffalo"
version = "0.1.0"
description = "Register models for the peripherals of Bouffalo chips"
requires-python = ">=3.10"
dependencies = []
keywords = ["bouffalo", "bl808", "bl616", "bl602", "bl702", "embedded", "registers", "dma", "gpio"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bouffalo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
