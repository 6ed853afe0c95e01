from setuptools import find_packages, setup


setup(
    name="ghstache",
    version="1.0.0",
    description="Motor de plantillas Mustache sin lógica (secciones, parciales y lambdas)",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
)
