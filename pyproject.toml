[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simple_pgw"
version = "0.1.0"
description = "A minimal PDN gateway model: control plane, data plane, bearers and per-bearer rate limits"
requires-python = ">=3.10"
dependencies = []
keywords = ["pgw", "lte", "epc", "teid", "bearer", "pdn", "apn", "rate-limit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simple-pgw = "simple_pgw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simple_pgw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
