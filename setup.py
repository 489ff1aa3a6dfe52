from setuptools import setup

setup(
    name = "yangstruct",
    packages = ["yangstruct"],
    version = "1.0.0",
    description = "Merging and copying of YANG data trees represented by Python structs",
    author = "Ladislav Lhotka",
    author_email = "lhotka@nic.cz",
    url = "https://github.com/CZ-NIC/yangstruct",
    entry_points = {
        "console_scripts": ["yangstruct=yangstruct.__main__:main"]
        },
    python_requires = ">=3.10",
    install_requires = ["elementpath"],
    tests_require = ["pytest"],
    extras_require = {"test": ["pytest"]},
    package_data = {"yangstruct": ["*.pyi"]},
    keywords = ["yang", "data model", "merge", "json"],
    classifiers = [
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries",
        "Topic :: System :: Systems Administration"],
    long_description = """\
.. |date| date::

*********************
Welcome to Yangstruct
*********************

:Author: Ladislav Lhotka <lhotka@nic.cz>
:Date: |date|

*Yangstruct* is a Python 3 library for merging, copying and pruning
trees of Python structs that represent data modelled using the YANG_
data modelling language, and for rendering them as `JSON encoded`_
data.

Installation
============

::

    python -m pip install yangstruct

Note that *Yangstruct* requires Python 3.10 or higher.

.. _JSON encoded: https://tools.ietf.org/html/rfc7951
.. _YANG: https://tools.ietf.org/html/rfc7950
"""
    )
