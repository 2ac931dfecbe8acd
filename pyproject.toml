[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spscorders"
version = "0.1.0"
description = "Bounded single-producer single-consumer ring queue for fixed-layout trading orders"
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "ring-buffer", "spsc", "orders", "trading", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spsc-bench = "spscorders.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["spscorders"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
