[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwmpcore"
version = "0.1.0"
description = "Core building blocks for a CWMP toolkit: bounded containers, a tracked memory pool, string helpers and socket wrappers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cwmp", "tr-069", "containers", "ring queue", "stack", "memory pool"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cwmpcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
