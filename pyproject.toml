[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "influxdb2"
version = "0.1.0"
description = "InfluxDB 2 line protocol encoding and API data models"
requires-python = ">=3.10"
dependencies = []
keywords = ["influxdb", "line-protocol", "time-series", "flux", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["influxdb2"]

[tool.pytest.ini_options]
addopts = "-ra"
