from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.org").read_text(encoding="utf-8")

setup(
    name="mfsuite",
    version="0.1.0",
    description="Conformance harness running microformats2 parsers against the shared microformats test suite",
    long_description=long_description,
    long_description_content_type="text/x-org",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "mf2py>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    keywords="microformats mf2 conformance test-suite fixtures parser",
    entry_points={
        "console_scripts": [
            "mfsuite=mfsuite.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Topic :: Text Processing :: Markup :: HTML",
        "License :: Public Domain",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    license="CC0",
)
