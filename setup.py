import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="livecurves",
    version="0.1.0",
    author="The livecurves authors",
    description="Composable modulation curves and envelopes for musical live coding.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.7",
    extras_require={
        "plotting": ["matplotlib"],
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
)
