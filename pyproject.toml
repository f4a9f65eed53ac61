[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnsimple-api"
version = "0.1.0"
description = "Client for the DNSimple v2 HTTP API and parser for its webhook events"
requires-python = ">=3.10"
keywords = ["dns", "dnsimple", "api", "zones", "webhooks", "registrar", "templates", "tld"]
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
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dnsimple_api"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
