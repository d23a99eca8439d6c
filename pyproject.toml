[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stdplus"
version = "0.1.0"
description = "Small systems utilities: managed handles, raw byte helpers, nul-terminated strings, exact descriptor I/O, line reading, subnets and test temp directories"
requires-python = ">=3.10"
dependencies = []
keywords = ["file-descriptor", "handle", "subnet", "bytes", "io", "mmap"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stdplus"]

[tool.pytest.ini_options]
addopts = "-ra"
