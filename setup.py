import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="lasserre",
    version="0.0.1",
    description="Exact volumes of H-polytopes by Lasserre's recursive method",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    # lasserre.io and lasserre.static carry no __init__.py
    packages=setuptools.find_namespace_packages(
        include=["lasserre", "lasserre.*"]
    ),
    install_requires=[
        "numpy",
        "pycddlib>=3.0",
        "scipy",
    ],
    extras_require={
        "test": ["ddt", "pytest"],
    },
    entry_points={
        "console_scripts": ["lasserre=lasserre.__main__:main"],
    },
    python_requires=">=3.7",
)
