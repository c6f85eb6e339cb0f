[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cerberus"
version = "0.8.0"
description = "Building blocks for a Redis cluster proxy: error types, string and address helpers, socket utilities and an epoll poller."
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "cluster", "proxy", "epoll", "sockets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cerberus"]

[tool.pytest.ini_options]
addopts = "-ra"
