"""
autorun - Setup Configuration

Filesystem layer for the autorun working directory: home directory
resolution (native and under Wine) and root-relative file operations.

License: MIT
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Core dependencies
core_deps = [
    "pydantic>=2.11.9",
    "click>=8.1.7",
]

# Development dependencies
dev_deps = [
    # Testing
    "pytest>=8.4.1",
    "pytest-cov>=6.2.1",
    # Code quality
    "black>=25.0.0",
    "flake8>=7.1.0",
    "mypy>=1.13.0",
]

setup(
    name="autorun",
    version="0.1.0",

    # Package description
    description="Root-relative filesystem layer for the autorun working directory",
    long_description=long_description,
    long_description_content_type="text/markdown",

    # Package discovery
    packages=find_packages(where="src"),
    package_dir={"": "src"},

    # Python version requirement
    python_requires=">=3.11",

    # Dependencies
    install_requires=core_deps,

    # Optional dependencies (extras)
    extras_require={
        "test": dev_deps[:2],
        "dev": dev_deps,
    },

    # PyPI classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Operating System :: Microsoft :: Windows",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: System :: Filesystems",
    ],

    keywords=["autorun", "filesystem", "wine", "lua"],

    license="MIT",

    include_package_data=True,
    zip_safe=False,

    entry_points={
        "console_scripts": [
            "autorun=autorun.cli:main",
        ],
    },
)
