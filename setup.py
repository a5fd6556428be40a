from setuptools import find_packages, setup

setup(
    name="linmap",
    version="0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    license="MIT License",
    description="A linear-scan dictionary with equality-based key matching",
    python_requires=">=3.9",
    install_requires=[
        "attrs>=22.2.0",
        "pyrsistent>=0.19.0",
        "typing-extensions>=4.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
