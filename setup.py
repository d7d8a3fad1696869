import setuptools
from pathlib import Path

readme = Path("README.md")
long_description = readme.read_text(encoding="utf-8") if readme.exists() else ""

setuptools.setup(
    name="lollyplot",
    version="0.1.0",
    description="Lollipop diagrams of protein mutations against domain annotations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "pandas>=1.3.0",
        "numpy>=1.20.0",
        "matplotlib>=3.6.0",
        "biopython>=1.78",
        "svgwrite>=1.4",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    packages=setuptools.find_packages(),
    package_data={
        'lollyplot': ['data/*.json'],
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "lollyplot=lollyplot.__main__:main",
        ],
    },
    python_requires=">=3.8",
)
