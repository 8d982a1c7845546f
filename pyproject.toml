[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "episolve"
version = "0.1.0"
description = "Solutions to classic array and primitive-type interview problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "interview", "arrays", "bit-manipulation", "sampling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["episolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
