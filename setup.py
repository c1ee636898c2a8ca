from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pynoisy",
    version="0.1.0",
    author="pynoisy contributors",
    description="Procedural noise images (color, white and simplex noise) with Taichi",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pynoisy", "pynoisy.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "taichi>=1.4.0",
        "numpy>=1.20.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="noise simplex procedural image generation taichi",
    entry_points={
        "console_scripts": [
            "pynoisy=pynoisy.cli.noise_commands:noisy",
        ],
    },
)
