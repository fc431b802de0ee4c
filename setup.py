# setup.py
from setuptools import setup, find_packages

setup(
    name="jlisp",
    version="0.1",
    description="A small Lisp with S-expressions, Q-expressions, closures and currying",
    packages=find_packages(include=["jlisp", "jlisp.*"]),
    package_data={"jlisp": ["prelude/*.jlsp"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
