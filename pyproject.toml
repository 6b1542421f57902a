[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedcollections"
version = "0.1.0"
description = "Linked-list stack and queue with interactive console menus for exploring them"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "queue", "linked list", "data structures", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkedcollections = "linkedcollections.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedcollections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
