#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="skillring",
        packages=find_packages(include=["skillring", "skillring.*"]),
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Radial skill selection menu with interruptible tweens",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        url="https://github.com/mirmik/skillring",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["ui", "tween", "animation", "radial-menu"],
        classifiers=[],
        include_package_data=True,
        install_requires=[
            "numpy",
            "PyQt6>=6.4",
        ],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "gui_scripts": [
                "skillring-demo = skillring.qt.__main__:main",
            ],
        },
        zip_safe=False,
    )
