#!/usr/bin/env python
from setuptools import (
    find_packages,
    setup,
)

description = "peerid: libp2p peer identities (keys, multihash ids and CIDs) for Python"

extras_require = {
    "dev": [
        "build>=0.9.0",
        "bump_my_version>=0.19.0",
        "ipython",
        "mypy==1.10.0",
        "pre-commit>=3.4.0",
        "tox>=4.0.0",
        "twine",
        "wheel",
    ],
    "test": [
        "pytest>=7.0.0",
        "pytest-xdist>=2.4.0",
        "pytest-trio>=0.5.2",
    ],
}

extras_require["dev"] = extras_require["dev"] + extras_require["test"]

try:
    with open("./README.md", encoding="utf-8") as readme:
        long_description = readme.read()
except FileNotFoundError:
    long_description = description

install_requires = [
    "base58>=1.0.3",
    "coincurve>=10.0.0",
    "protobuf>=6.30.1",
    "py-multibase>=1.0.3",
    "py-multicodec>=0.2.1",
    "pycryptodome>=3.9.2",
    "pymultihash>=0.8.2",
    "pynacl>=1.3.0",
    "trio>=0.26.0",
    "varint>=1.0.2",
]

setup(
    name="peerid",
    version="0.1.0",
    description=description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.10, <4",
    extras_require=extras_require,
    license="MIT AND Apache-2.0",
    zip_safe=False,
    keywords="libp2p p2p peer-id multihash cid",
    packages=find_packages(exclude=["scripts", "scripts.*", "tests", "tests.*"]),
    package_data={"peerid": ["py.typed"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    platforms=["unix", "linux", "osx", "win32"],
    entry_points={
        "console_scripts": [
            "peerid=peerid.cli:main",
        ],
    },
)
