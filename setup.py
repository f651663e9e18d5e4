# setup.py
from setuptools import setup, find_packages

setup(
    name="object-validator",          # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # will find object_validator/
    install_requires=["pandas"],      # DataFrame validation + CSV input
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["object-validator=object_validator.cli:main"],
    },
    python_requires=">=3.8",
    description="Declarative per-field validation of structured records",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
