#!/usr/bin/env python3

import sys
from pathlib import Path

from setuptools import setup, find_packages

UTF_ENCODING = "utf-8"

REQUIRED_MAJOR = 3
REQUIRED_MINOR = 8

ROOT_DIR = Path(__file__).parent.resolve()


def _get_version() -> str:
    init_file = ROOT_DIR.joinpath("formpart").joinpath("__init__.py")
    with open(init_file, encoding=UTF_ENCODING) as file:
        for line in file.read().splitlines():
            if line.startswith("__version__"):
                delim = '"' if '"' in line else "'"
                version = line.split(delim)[1]
                print("Setup detected formpart version:", version)
                return version
    raise RuntimeError(f"Unable to find version string in {init_file}")


# Check for python version
if sys.version_info < (REQUIRED_MAJOR, REQUIRED_MINOR):
    error = (
        "Your version of python ({major}.{minor}) is too old. You need "
        "python >= {required_major}.{required_minor}."
    ).format(
        major=sys.version_info.major,
        minor=sys.version_info.minor,
        required_minor=REQUIRED_MINOR,
        required_major=REQUIRED_MAJOR,
    )
    sys.exit(error)

# Read in README.md for our long_description
with open(ROOT_DIR.joinpath("README.md"), encoding=UTF_ENCODING) as f:
    long_description = f.read()

setup(
    name="formpart",
    version=_get_version(),
    description="Single-pass materialization of file parts from streamed multipart uploads.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords=[
        "multipart",
        "upload",
        "streaming",
    ],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Internet :: WWW/HTTP",
    ],
    license="MIT",
    python_requires=">=3.8",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=["requests", "pydantic>=2", "overrides", "humanize"],
    extras_require={
        "test": ["pytest"],
    },
)
