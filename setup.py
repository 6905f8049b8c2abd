from setuptools import setup, find_packages
import codecs
import os

here = os.path.abspath(os.path.dirname(__file__))

with codecs.open(os.path.join(here, "README.md"), encoding="utf-8") as fh:
    long_description = "\n" + fh.read()

VERSION = '0.5.0'
DESCRIPTION = 'Procedural meshes for cones, cylinders, tori, grids, polygons and tubes'

# Setting up
setup(
    name="pymoreshapes",
    version=VERSION,
    author="rootjatin (Jatin Sharma)",
    author_email="<jatin100198@gmail.com>",
    description=DESCRIPTION,
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=['numpy'],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["moreshapes=moreshapes.cli:main"],
    },
    keywords=['python', 'three dimensional', 'mesh', 'procedural', 'geometry', 'triangulation', '3d'],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Graphics :: 3D Modeling",
        "Programming Language :: Python :: 3",
        "Operating System :: Unix",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
    ]
)
