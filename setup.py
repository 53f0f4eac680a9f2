import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("lexorder/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="lexorder",
    version=version,
    description="Order keys that sort as strings. Insert between any two, forever, without renumbering.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    python_requires=">=3.6",
    extras_require={
        'test': ['pytest'],
            # NOTE:  The tests are plain unittest.  pytest is only a nicer runner for them.
    },
    platforms=['any'],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries",
            # ordered lists
            # fractional indexing
            # sibling order in trees
    ],
)
