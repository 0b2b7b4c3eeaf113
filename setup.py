from setuptools import find_packages, setup

setup(
    name="quadroots",
    version="0.1.0",
    description="Store a quadratic polynomial with base64 encoded roots and "
    "recover its constant term",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"quadroots": ["logging/logger.conf"]},
    install_requires=[
        "pydantic>=2",
        "pyrsistent",
        "pyyaml",
    ],
    extras_require={
        "dev": [
            "hypothesis",
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "quadroots=quadroots.console:main",
        ],
    },
)
