from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyfastresample",
    version="0.1.0",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Parallel image resampling, blur and sharpen routines",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyfastresample", "pyfastresample.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    python_requires=">=3.10",
    install_requires=[
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
    keywords="image resize resampling lanczos gaussian blur sharpen",
    entry_points={
        "console_scripts": [
            "pfr-resize=pyfastresample.cli.resize_commands:resize_image",
            "pfr-fit=pyfastresample.cli.resize_commands:fit_image",
            "pfr-thumbnail=pyfastresample.cli.resize_commands:thumbnail_image",
            "pfr-blur=pyfastresample.cli.filter_commands:blur_image",
            "pfr-sharpen=pyfastresample.cli.filter_commands:sharpen_image",
        ],
    },
)
