"""Setup script for the Flockwave British National Grid package."""

from setuptools import setup, find_namespace_packages

requires = []

__version__ = None
exec(open("src/flockwave/bng/version.py").read())

setup(
    name="flockwave-bng",
    version=__version__,
    author="Tamás Nepusz",
    author_email="tamas@collmot.com",
    description="Conversion between WGS84 coordinates and the British National Grid",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["flockwave.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requires,
    extras_require={"test": ["pytest>=7.0"]},
)
