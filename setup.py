from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    LONG_DESCRIPTION = fh.read()

TESTS_REQUIRE = [
    "pytest",
    "pytest-mock",
    "pylint",
    "black>=20.8b1",
    "bandit",
    "pytest-xdist",
]

# pylint: disable=line-too-long
setup(
    name="ecl-pvt",
    version="0.1.0",
    description="Unit conversion and curve evaluation of PVT tables in Eclipse INIT files",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    author="R&T Equinor",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.17",
        "pandas>=0.24",
        "scipy>=1.2",
    ],
    tests_require=TESTS_REQUIRE,
    extras_require={
        "tests": TESTS_REQUIRE,
        "opm": ["opm>=2020.10.1; sys_platform=='linux'"],
    },
    python_requires=">=3.8",
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Natural Language :: English",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    ],
)
