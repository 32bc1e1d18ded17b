[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oas_validator"
version = "0.1.0"
description = "Building blocks for validating HTTP requests and responses against OpenAPI 3 documents"
requires-python = ">=3.10"
keywords = ["openapi", "validation", "http", "json-schema", "api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "jsonschema",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["oas_validator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
