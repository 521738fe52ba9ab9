from setuptools import (
    setup,
    find_packages,
)

setup(
    name="abi-return-guesser",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "eth-abi>=4.1.0",
        "eth-typing>=3.2.0",
        "eth-utils>=2.1.0",
        "hexbytes>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "abi-return-guesser=abi_return_guesser.cli:main",
        ],
    },
    description="Guess the Solidity types of EVM call return data without an ABI",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
