[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xv6util"
version = "0.1.0"
description = "Pure-Python models of a teaching kernel's Sv39 paging arithmetic, ELF headers, printf, malloc, grep and shell parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["xv6", "risc-v", "sv39", "elf", "printf", "malloc", "shell", "grep", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv6-grep = "xv6util.grep:main"

[tool.hatch.build.targets.wheel]
packages = ["xv6util"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
