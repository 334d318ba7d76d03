""" btcecc build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import btcecc

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=btcecc.name,
    version=btcecc.__version__,
    license=btcecc.__license__,
    author=btcecc.__author__,
    author_email=btcecc.__author_email__,
    description="Prime field and secp256k1 elliptic curve arithmetic for bitcoin",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords=(
        "bitcoin cryptography elliptic-curves finite-fields secp256k1 "
        "ecdsa SEC RFC-6979"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
