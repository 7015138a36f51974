[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvtools"
version = "0.1.0"
description = "Models and tools for a small RISC-V teaching operating system: Sv39 helpers, ELF headers, a heap allocator, a shell parser, grep and wc"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-system", "risc-v", "sv39", "elf", "shell", "grep", "wc", "teaching"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-grep = "xvtools.grep:main"
xv-wc = "xvtools.wc:main"

[tool.hatch.build.targets.wheel]
packages = ["xvtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
