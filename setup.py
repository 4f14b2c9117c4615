from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="unitconvert",
    version="0.1.0",
    author="unitconvert Development Team",
    author_email="unitconvert@example.com",
    description="Runtime physical unit conversions from plain text unit definitions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/unitconvert",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "docs"]),
    package_data={
        "unitconvert": ["data/*.txt"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Physics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "pint>=0.18",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "uc=unitconvert.cli:main",
        ],
    },
)
