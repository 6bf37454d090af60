from setuptools import setup, find_packages

setup(
    name="json2rss",
    version="1.0.0",
    description="Convert JSON Feed documents and blog site data to RSS 2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dateutil>=2.8.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "feedparser>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "json2rss=json2rss.cli:main",
        ],
    },
    python_requires=">=3.9",
)
