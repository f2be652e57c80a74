import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()
    
with open("VERSION", "r") as v:
    version_string = v.read().strip()

setuptools.setup(
    name="pydendrite",
    version=version_string,
    description="Kobayashi phase field dendrite growth with a guiding orientation field",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
	install_requires=[
        "numpy",
        "scipy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires='>=3.7',
)
