from setuptools import setup, find_packages

setup(
    name="discflight",
    version="0.1.0",
    description="Disc golf flight path diagrams from speed, glide, turn and fade",
    author="discflight",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26.0",
        "scipy>=1.12.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "discflight=discflight.main:main",
        ],
    },
)
