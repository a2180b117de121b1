[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricskit"
version = "0.1.0"
description = "A lightweight metrics facade with thread-safe buckets, compressed integer sets, quantile labels and metric trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "monitoring", "telemetry", "histogram", "quantile", "counter", "gauge"]
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
    "Topic :: System :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricskit-example = "metricskit.example:main"

[tool.hatch.build.targets.wheel]
packages = ["metricskit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
