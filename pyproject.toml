[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minisipcodec"
version = "0.0.1"
description = "A small codec for parsing and generating SIP messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["sip", "voip", "codec", "parser", "generator", "rfc3261"]
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
    "Topic :: Communications :: Internet Phone",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minisipcodec = "minisipcodec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minisipcodec"]

[tool.pytest.ini_options]
addopts = "-ra"
