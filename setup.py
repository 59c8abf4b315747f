from setuptools import setup, find_packages

setup(
    name="hawkdove",
    version="0.1.0",
    packages=find_packages(include=["hawkdove", "hawkdove.*"]),
    install_requires=[
        "numpy",
        "tabulate"
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis>=6.31"
        ],
    },
)
