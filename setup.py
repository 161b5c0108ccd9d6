#!/usr/bin/env python
import os
import re

from setuptools import find_packages, setup


def get_version():
    path = os.path.join(os.path.dirname(__file__), "src", "image_layers", "version.py")
    with open(path, encoding="utf-8") as f:
        return re.search(r'__version__ = "([^"]+)"', f.read()).group(1)


setup(
    name="image-layers",
    version=get_version(),
    description="Compose aligned image layers and write them as PNG or JPEG",
    license="MIT",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "attrs>=23.1.0",
        "numpy",
        "Pillow>=10.0.0",
        "typing_extensions; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest", "pytest-cov"],
        "dev": ["ipython"],
    },
    entry_points={
        "console_scripts": ["image-layers=image_layers.__main__:main"],
    },
)
