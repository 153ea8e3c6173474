from setuptools import setup, find_packages

setup(
    name="ChromaColor",
    version="0.1.0",
    description="Colorimetric conversion and chromatic adaptation between CIE XYZ and device color models",
    packages=find_packages(include=["ChromaColor", "ChromaColor.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "colour-science>=0.4.0",
        "matplotlib>=3.9.3",
        "numpy>=2.2.0",
    ],  # Core dependencies
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
