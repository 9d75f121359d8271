[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorsim"
version = "0.1.0"
description = "Simulated I2C sensor sampling with median filtering, ring buffers, statistics and a producer-consumer queue demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensor", "simulation", "i2c", "ring-buffer", "median-filter", "producer-consumer", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sensorsim = "sensorsim.simulation:main"
sensorsim-rtos = "sensorsim.rtos:main"

[tool.hatch.build.targets.wheel]
packages = ["sensorsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
