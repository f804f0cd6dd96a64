# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mktree",
    version="1.0.0",
    description="Create directory and file hierarchies from text tree diagrams",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mktree", "mktree.*"]),
    package_data={
        "mktree.interface": ["locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mktree=mktree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
