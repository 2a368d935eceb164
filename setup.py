# setup.py
from setuptools import setup, find_packages

setup(
    name="licensegen",
    version="0.1.0",
    description="Generate LICENSE files and add SPDX headers to source files",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'licensegen=licensegen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
