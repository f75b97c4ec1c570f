[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clamdclient"
version = "0.1.0"
description = "Client for the ClamAV daemon over TCP or Unix sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["clamav", "clamd", "antivirus", "virus-scanning", "security"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clamdclient = "clamdclient.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clamdclient"]

[tool.pytest.ini_options]
addopts = "-ra"
