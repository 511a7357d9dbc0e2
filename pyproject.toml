[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reposcan"
version = "1.3.7"
description = "Scan directories for Git repositories and report uncommitted and ahead/behind status"
requires-python = ">=3.11"
keywords = ["git", "repositories", "scan", "status", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
reposcan = "reposcan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["reposcan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
