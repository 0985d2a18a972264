from setuptools import setup, find_packages

setup(
    name="connect4-search",
    version="0.1.0",
    description="Connect Four with an exhaustive depth-bounded move search",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4-search=connect4_search.interfaces.cli:main",
        ],
    },
)
