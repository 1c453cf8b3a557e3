from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "typing-extensions>=4.4.0",
    "python-Levenshtein>=0.21.0"
]

setup(
    name="colorvalue",
    version="0.1.0",
    description="Parse, convert, measure and transform CSS-like color values",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "colorvalue=colorvalue.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
