from setuptools import setup, find_packages

# Read long description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="vttscan",
    version="0.1.0",
    author="VTTScan Contributors",
    description="Streaming single-pass WebVTT parser",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/vttscan/vttscan",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Video",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    include_package_data=True,
    keywords="vtt webvtt subtitles captions parser streaming",
    project_urls={
        "Bug Reports": "https://github.com/vttscan/vttscan/issues",
        "Source": "https://github.com/vttscan/vttscan",
        "Documentation": "https://github.com/vttscan/vttscan#readme",
    },
)
