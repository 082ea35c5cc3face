from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "defusedxml>=0.7.1",
    "cairosvg>=2.5.2",
    "pillow>=9.3.0"
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0"
]

setup(
    name="infrable_logo",
    version="0.1.0",
    description="A simple CLI that programmatically generates the Infrable logo as SVG",
    author="Infrable",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "logo=infrable_logo.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
