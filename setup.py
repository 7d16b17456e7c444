from setuptools import setup, find_packages

setup(
    name="deeply",
    version="0.1.0",
    description="Deeply - JSON-RPC protocol layer for the DeepL translation API",
    author="Deeply Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-benchmark",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
