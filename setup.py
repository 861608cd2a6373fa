from setuptools import setup, find_packages

setup(
    name="nearrpc",
    version="0.1.0",
    description="Typed JSON-RPC client for NEAR Protocol nodes",
    author="nearrpc Team",
    packages=find_packages(include=["nearrpc", "nearrpc.*"]),
    install_requires=[
        "protobuf>=4.21.0",
        "pyzmq>=24.0.0",
        "httpx>=0.24.0",
        "pydantic>=2.5.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
