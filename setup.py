# setup.py
from setuptools import setup, find_packages

setup(
    name="lamb",
    version="0.1.0",
    description="A small dynamically-typed expression language with closures",
    packages=find_packages(include=["lamb", "lamb.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lamb=lamb.__main__:main"],
    },
    zip_safe=False,
)
