[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packetproc"
version = "0.1.0"
description = "Generate random base64 text samples and count the English letters and other bytes in them"
requires-python = ">=3.10"
dependencies = []
keywords = ["base64", "csv", "text", "persian", "character-count", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Persian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
packetproc = "packetproc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["packetproc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
