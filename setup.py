from setuptools import setup, find_packages

setup(
    name="hivmap",
    version="0.1.0",
    description="Render HIV-1 genome maps annotated with recombinant subtype regions",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),

    install_requires=[
        "numpy",
        "matplotlib>=3.3",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "pillow",
        ],
    },
    entry_points={
        "console_scripts": [
            "hivmap = hivmap.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.9",
)
