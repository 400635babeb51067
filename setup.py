"""Setup script for powervs-sdk package."""
import re
from pathlib import Path
from setuptools import setup, find_packages

here = Path(__file__).parent

# Read long description from README
readme_file = here / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

version_file = (here / "powervs_sdk" / "version.py").read_text(encoding="utf-8")
version = re.search(r'^__version__ = "([^"]+)"', version_file, re.M).group(1)

setup(
    name="powervs-sdk",
    version=version,
    description="Python SDK for the IBM Power Virtual Server REST API",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "powervs-sdk=powervs_sdk.__main__:main",
        ],
    },
    long_description=long_description,
    long_description_content_type="text/markdown",
)
