#!/usr/bin/env python

# Support setuptools only, distutils has a divergent and more annoying API and
# few folks will lack setuptools.
from setuptools import setup, find_packages

# Version info -- read without importing
_locals = {}
with open("packager/_version.py") as fp:
    exec(fp.read(), None, _locals)
version = _locals["__version__"]

exclude = ["tests", "tests.*", "integration", "integration.*"]

# Frankenstein long_description
long_description = """
{}

For usage examples, see the docstring of `packager.PackageTask`.
""".format(
    open("README.rst").read()
)


setup(
    name="invoke-packager",
    version=version,
    description="Declarative package tasks (tarball, zip, gem) for Invoke",
    license="BSD",
    long_description=long_description,
    python_requires=">=3.6",
    install_requires=["invoke>=2.0"],
    extras_require={
        "testing": ["pytest>=7", "pytest-relaxed>=2"],
    },
    packages=find_packages(exclude=exclude),
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: POSIX",
        "Operating System :: Unix",
        "Operating System :: MacOS :: MacOS X",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development",
        "Topic :: Software Development :: Build Tools",
        "Topic :: System :: Archiving :: Packaging",
        "Topic :: System :: Software Distribution",
    ],
)
