[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Small data structures, iteration helpers and a binary pattern grep"
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "binary", "deque", "hashmap", "lru-cache", "channel", "data-structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbox-bgrep = "drillbox.bgrep:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
