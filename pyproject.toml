[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfspeedtest"
version = "1.2.0"
description = "Helpers for a connection speed test: duration parsing, exit statuses and SI/IEC unit formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["speedtest", "bandwidth", "latency", "units", "duration", "exit-status"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfspeedtest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
