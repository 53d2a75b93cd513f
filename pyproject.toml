[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minihttpd"
version = "0.1.0"
description = "HTTP/1.1 request parsing, routing and response building for a small server with stats, static files and a calculator endpoint"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "request", "response", "router", "static-files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minihttpd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
