[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cukerun"
version = "0.1.0"
description = "Gherkin document model, tag-expression filtering, scenario-outline expansion and scenario collection for BDD runners"
requires-python = ">=3.10"
dependencies = []
keywords = ["bdd", "gherkin", "cucumber", "tag-expressions", "scenario-outline", "testing"]
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
    "Topic :: Software Development :: Testing :: BDD",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cukerun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
