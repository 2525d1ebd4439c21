# setup.py
from setuptools import setup, find_packages

setup(
    name="zeus",
    version="0.1.0",
    description="A small Lisp-family interpreter with closures, tail calls and symbol property lists",
    packages=find_packages(include=["zeus", "zeus.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
