"""Module setup."""

import os
import runpy
from setuptools import setup, find_packages

PACKAGE_NAME = "presentation_exchange"
version_meta = runpy.run_path("./{}/version.py".format(PACKAGE_NAME))
VERSION = version_meta["__version__"]


with open(os.path.abspath("./README.md"), "r") as fh:
    long_description = fh.read()


def parse_requirements(filename):
    """Load requirements from a pip requirements file."""
    with open(filename) as fh:
        lineiter = (line.strip() for line in fh)
        return [
            line
            for line in lineiter
            if line and not line.startswith("#") and not line.startswith("git+")
        ]


if __name__ == "__main__":
    setup(
        name="presentation-exchange",
        version=VERSION,
        description="Presentation Exchange object model and submission decoding",
        long_description=long_description,
        long_description_content_type="text/markdown",
        packages=find_packages(),
        include_package_data=True,
        package_data={PACKAGE_NAME: ["config/default_logging_config.ini"]},
        install_requires=parse_requirements("requirements.txt"),
        extras_require={
            "test": parse_requirements("requirements.dev.txt"),
        },
        python_requires=">=3.9",
        classifiers=[
            "Programming Language :: Python :: 3",
            "License :: OSI Approved :: Apache Software License",
            "Operating System :: OS Independent",
        ],
    )
