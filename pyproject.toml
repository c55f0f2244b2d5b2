[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xcmd"
version = "0.1.0"
description = "Small everyday helpers: date strings, environment lookups, git markdown filters, clipboard, public IP, weather, kubeseal and note picking"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "clipboard", "kubeseal", "markdown", "dates"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xcmd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
