from setuptools import find_packages, setup

setup(
    name="warpcomplex",
    version="0.1.0",
    packages=find_packages(exclude=["test", "test.*"]),
    install_requires=[
        "warp-lang>=1.6.0",
        "torch>=2.0.0",
        "numpy",
        "pyyaml",
    ],
    extras_require={"test": ["pytest"]},
    description="Complex arithmetic device functions for NVIDIA Warp kernels",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
