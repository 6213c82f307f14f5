from setuptools import setup, find_packages


setup(
    name="tinycrc",
    version="0.1",
    packages=find_packages(include=["tinycrc", "tinycrc.*"]),
    description="Portable table-driven CRC32C (Castagnoli) checksums, one-shot and incremental.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tinycrc=tinycrc.cli:main",
        ]
    },
)
