[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mercurystreams"
version = "0.1.0"
description = "Int192 value encoding, report field validation, parsed observations and market-status consensus for data-stream price reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["price feed", "oracle", "int192", "consensus", "report validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mercurystreams"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
