from setuptools import setup, find_packages

setup(
    name="fixedrational",
    version="1.0",
    url="https://github.com/klamt-lab/fixedrational.git",
    description="Exact rational numbers over fixed-width integer types",
    long_description=("Exact rational numbers whose numerator and denominator are numpy fixed-width integers or "
                      "Python ints, kept in canonical form, with exact conversion of floating point values"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(include=["fixedrational", "fixedrational.*"]),
    install_requires=["numpy>=2", "sympy"],
    extras_require={
        "flint": ["python-flint"],
        "test": ["pytest"],
    },
    project_urls={
        "Bug Reports": "https://github.com/klamt-lab/fixedrational/issues",
        "Source": "https://github.com/klamt-lab/fixedrational/",
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational", "fraction", "exact arithmetic", "fixed-width integer"],
    zip_safe=False,
)
