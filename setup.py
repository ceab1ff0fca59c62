"""
Installation setup for lotrcards
"""
import pathlib
import re

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read the version without importing the package
version_match = re.search(
    r'__version__\s*=\s*"([^"]+)"',
    project_root.joinpath("lotrcards/_version.py").read_text(encoding="utf-8"),
)

setuptools.setup(
    name="lotrcards",
    version=version_match.group(1) if version_match else "1.0.0+fallback",
    description="Lord of the Rings TCG card catalog archiver",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python",
        "Topic :: Internet :: WWW/HTTP",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "Lord of the Rings",
        "Markdown",
        "Trading Cards",
    ],
    python_requires=">=3.8",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "responses",
        ],
    },
)
