# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="entrytree",
    version="0.1.0",
    description="In-memory hierarchical entry tree with size aggregation, listing and visitors",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["entrytree", "entrytree.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'entrytree=entrytree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
