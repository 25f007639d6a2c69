[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fakesmith"
version = "0.1.0"
description = "Random fake data for tests: numbers, words, passwords, UUIDs, colours, card details, network addresses, dates, user agents and dataclass filling."
requires-python = ">=3.10"
dependencies = []
keywords = ["fake", "faker", "random", "test data", "fixtures", "generator", "mock data"]
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
    "Topic :: Software Development :: Testing",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fakesmith"]

[tool.hatch.build.targets.sdist]
include = ["fakesmith", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
