# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="xtree",
    version="0.1.0",
    description="Directory tree generator that keeps only branches matching a search term",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["xtree", "xtree.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'xtree=xtree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
