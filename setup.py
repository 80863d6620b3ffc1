from setuptools import setup, find_packages

setup(
    name="well-watched",
    version="0.1.0",
    description="In-memory registry of topics and the watchers subscribed to them",
    author="Mudakka",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.7.1",
        "python-dotenv>=1.0.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
)
