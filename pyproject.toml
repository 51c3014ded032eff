[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catchreport"
version = "0.1.0"
description = "Convert Catch2 XML test reports into test-runner JSON results"
requires-python = ">=3.10"
dependencies = []
keywords = ["catch2", "test-runner", "xml", "json", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
catchreport = "catchreport.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["catchreport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
