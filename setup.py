# setup.py
from setuptools import setup, find_packages

setup(
    name="mdscaffold",
    version="1.0.0",
    description="Create directory and file scaffolds from markdown outlines",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'mdscaffold=mdscaffold.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
