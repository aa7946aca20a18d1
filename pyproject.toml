[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flameyutils"
version = "0.2.2"
description = "Small helpers for prompting, range-bounded list statistics, randomisation, case conversion and toy sorting algorithms."
requires-python = ">=3.10"
keywords = ["utilities", "sorting", "statistics", "prompts", "input", "random"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flameyutils-demo = "flameyutils.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["flameyutils"]

[tool.pytest.ini_options]
addopts = "-ra"
