from setuptools import setup, find_packages

setup(
    name="crayon",
    version="0.1.0",
    description="Terminal text styling with ANSI escape codes",
    packages=find_packages(include=["crayon", "crayon.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["crayon=crayon.cli:main"],
    },
    python_requires=">=3.11",
)
