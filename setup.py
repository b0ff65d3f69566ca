from setuptools import setup, find_packages

setup(
    name="sdfgen",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "torch>=1.9.0",
        "matplotlib",
        "numpy",
        "pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sdfgen=sdfgen.cli:console_main",
        ],
    },
    description="Signed distance fields from mask images using the 8SSEDT distance transform",
    keywords="sdf, distance transform, 8ssedt, image processing",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
)
