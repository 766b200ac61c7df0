"""
Setup script for http_factory_test.

This script handles the installation of the package and registers
the pytest plugin that configures the conformance suites.
"""

import sys
from setuptools import setup, find_packages


def get_long_description():
    """Get long description from README."""
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Conformance test suites for HTTP message factory implementations"


def main():
    """Main setup function."""
    # Check Python version
    if sys.version_info < (3, 8):
        raise RuntimeError("Python 3.8 or higher is required")

    setup(
        name="http_factory_test",
        version="0.1.0",
        description="Conformance test suites for HTTP message factory implementations",
        long_description=get_long_description(),
        long_description_content_type="text/markdown",
        author="Developer",
        author_email="dev@example.com",
        url="https://github.com/yourusername/http_factory_test",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.8",
        install_requires=[
            "h11>=0.14.0",
            "pytest>=7.0.0",
            "typing-extensions>=4.0.0",
        ],
        extras_require={
            "dev": [
                "pytest-cov>=4.0.0",
                "black>=22.0.0",
                "mypy>=1.0.0",
                "pre-commit>=2.20.0",
            ],
            "test": [
                "pytest-cov>=4.0.0",
            ],
        },
        entry_points={
            "pytest11": [
                "http_factory_test = http_factory_test.plugin",
            ],
        },
        classifiers=[
            "Development Status :: 3 - Alpha",
            "Framework :: Pytest",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Internet :: WWW/HTTP",
            "Topic :: Software Development :: Testing",
        ],
        keywords=["http", "psr-7", "factory", "conformance", "pytest"],
        zip_safe=False,
        include_package_data=True,
    )


if __name__ == "__main__":
    main()
