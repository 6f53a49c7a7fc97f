from setuptools import find_packages, setup

setup(
    name="argslide",
    version="0.1.0",
    description="Declarative command-line option parser with typed extraction.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argslide", "argslide.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "python-json-logger>=3.1",
        "pydantic>=2",
        "PyYAML",
        "toml",
        "python-dateutil",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["argslide=argslide.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
