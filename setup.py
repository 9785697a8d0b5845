from setuptools import setup, find_packages


# This is the function that is executed
setup(
    name="biomartclient",  # Required
    version="0.1.0",
    description="Client for the BioMart martservice web service",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "requests",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
