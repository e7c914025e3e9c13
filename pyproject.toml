[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proptree"
version = "0.1.0"
description = "Ordered property trees with dotted-path access, JSON and XML readers and an INFO writer."
requires-python = ">=3.10"
dependencies = []
keywords = ["property tree", "configuration", "json", "xml", "info", "settings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["proptree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
