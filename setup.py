from setuptools import find_packages, setup

setup(
    name="simpleargparse",
    version="0.1.0",
    description="A small argparse-style command-line parser with nested sub-commands.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="SimpleArgParse contributors",
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.10",
    license="MIT",
    install_requires=[
        "rich>=13.0",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={
        "console_scripts": ["simpleargparse=simpleargparse.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
