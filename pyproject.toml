[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mallmanager"
version = "0.1.0"
description = "A small model of a shopping mall (stores, staff, clients and products) with a text menu for adding stores"
requires-python = ">=3.10"
dependencies = []
keywords = ["mall", "store", "products", "employees", "management"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Romanian",
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
mallmanager = "mallmanager.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["mallmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
