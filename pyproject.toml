[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mipstran"
version = "0.1.0"
description = "Translate between MIPS assembly and 32-bit machine code"
requires-python = ">=3.10"
dependencies = []
keywords = ["mips", "assembler", "disassembler", "machine code", "instruction encoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mipstran = "mipstran.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mipstran"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
