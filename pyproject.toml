[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "medsim"
version = "0.1.0"
description = "Simulated medical device firmware: sensor controllers running on a cooperative, generator-based task scheduler over emulated hardware"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "rtos", "embedded", "medical-device", "scheduler", "generators"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
medsim = "medsim.main:main"

[tool.hatch.build.targets.wheel]
packages = ["medsim"]

[tool.pytest.ini_options]
addopts = "-ra"
