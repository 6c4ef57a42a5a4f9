# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="evbgen",
    version="0.5.0",
    description="Generate Enigma Virtual Box project files that pack a whole directory tree",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["evbgen", "evbgen.*"]),
    package_data={"evbgen": ["templates/*.xml"]},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'evbgen=evbgen.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
