[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codewriter"
version = "0.1.0"
description = "Printf-style writers for emitting generated source code to files, standard output or in-memory strings."
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "writer", "printf", "output"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codewriter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
