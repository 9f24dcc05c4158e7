[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcli"
version = "0.1.0"
description = "LinkedIn REST API client library: domain models, service calls, credential storage and output formatting"
requires-python = ">=3.10"
keywords = ["linkedin", "api", "client", "rest", "oauth", "yaml", "table"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lcli"]

[tool.pytest.ini_options]
addopts = "-ra"
