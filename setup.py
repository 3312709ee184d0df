"""Setup file for project"""


from setuptools import setup, find_packages

with open("README.md", 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name                            = "pontos-vessel-data",
    version                         = "0.1.0",
    description                     = "Download daily vessel telemetry from the PONTOS data hub as CSV",
    long_description                = long_description,
    long_description_content_type   = "text/markdown",
    packages                        = find_packages(include=["src", "src.*"]),
    install_requires                = [
        "requests>=2.28",
        "pandas>=2.0",
        "numpy>=1.24",
        "python-dotenv>=1.0",
        "colorama>=0.4.6",
    ],
    extras_require                  = {
        "test": ["pytest>=7"],
    },
    entry_points                    = {
        "console_scripts": ["pontos=src.pontos.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",           # Minimum Python version
)
