# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A small S-expression interpreter with integers, booleans, strings and global variables",
    packages=find_packages(include=["minilisp", "minilisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minilisp=minilisp.repl:main"],
    },
    zip_safe=False,
)
