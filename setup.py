from setuptools import find_packages, setup

setup(
    name="dirwiz",
    version="0.1.0",
    description="Lazy directory walker with splittable, interleavable work stacks",
    python_requires=">=3.12",
    packages=find_packages(include=["dirwiz", "dirwiz.*"]),
    install_requires=[
        "result>=0.17",
        "rich>=13",
    ],
    extras_require={
        "test": ["pytest>=8"],
    },
)
