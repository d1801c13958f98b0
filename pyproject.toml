[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkomat"
version = "0.1.0"
description = "Interactive console parking lot system: tickets, payments, subscribers and an admin panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["parking", "tickets", "console", "billing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parkomat = "parkomat.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["parkomat"]

[tool.pytest.ini_options]
addopts = "-ra"
