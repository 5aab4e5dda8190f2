from setuptools import setup, find_packages

setup(
    name="matrixdet",
    version="1.0",
    description="Exact determinants of integer matrices read from text streams",
    long_description=("Reads square integer matrices, each preceded by its order, from a text stream and writes a "
                      "transcript of the input annotated with the exact determinant of every matrix or the parse "
                      "error that made it unreadable"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["matrixdet", "matrixdet.*"]),
    install_requires=["numpy"],
    extras_require={"tests": ["pytest", "sympy"]},
    entry_points={"console_scripts": ["matrixdet=matrixdet.cli:start_from_command_line"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["determinant", "matrix", "rational arithmetic", "gaussian elimination"],
    zip_safe=False,
)
