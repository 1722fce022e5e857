# setup.py
from setuptools import setup, find_packages

setup(
    name="slisp",
    version="0.3.0",
    description="SLisp: a small Lisp with namespaces, macros and tail calls",
    packages=find_packages(include=["slisp", "slisp.*"]),
    package_data={"slisp": ["lib/*.sl"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["slisp=slisp.__main__:main"],
    },
    zip_safe=False,
)
