[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowevents"
version = "0.1.0"
description = "An in-process event bus with synchronous, thread-pool and deferred timer-tick dispatch"
requires-python = ">=3.10"
keywords = ["event bus", "publish subscribe", "dispatch", "listeners", "events"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flowevents"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
