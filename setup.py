from setuptools import setup, find_packages

setup(
    name="kenpom-scraper",
    version="0.1.0",
    description="Scrape and normalize kenpom.com college basketball tables",
    author="Ben Rosen",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=4.9.0",
    ],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
)
