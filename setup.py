"""
Setup configuration for the extended package.
"""

from setuptools import find_packages, setup

setup(
    name="extended-reals",
    version="0.1.0",
    description="Numeric kinds extended with positive and negative infinity.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.24",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "extended-benchmark=extended.benchmark:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
