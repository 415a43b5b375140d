[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compilerlab"
version = "0.1.0"
description = "Small compiler-course tools: string exercises, three-address code generation, TAC optimisation and 8086 code emission"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "three-address code", "tac", "optimisation", "8086", "copy propagation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilerlab-text = "compilerlab.textops:main"
compilerlab-asm8086 = "compilerlab.asm8086:main"
compilerlab-gentac = "compilerlab.gentac:main"
compilerlab-optimise = "compilerlab.optimise:main"
compilerlab-copyprop = "compilerlab.copyprop:main"

[tool.hatch.build.targets.wheel]
packages = ["compilerlab"]

[tool.pytest.ini_options]
addopts = "-ra"
