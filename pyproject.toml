[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotforge"
version = "0.2.0"
description = "Symlink helpers for managing dotfiles, in the spirit of GNU Stow"
requires-python = ">=3.10"
keywords = ["symlink", "dotfiles", "stow", "configuration"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dotforge = "dotforge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dotforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
