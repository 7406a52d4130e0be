from setuptools import find_packages, setup

setup(
    name="rkeys",
    version="0.1.0",
    description="Bulk key inspection and maintenance for Redis / Valkey",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "redis>=5.0",  # Single-node and cluster clients
        "fakeredis>=2.20",  # In-memory store backend
        "typer",  # Command-line interface
        "click",  # Usage errors raised under Typer
        "pydantic>=2.0",  # Config and output schemas
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Highlighted output on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
    entry_points={
        "console_scripts": [
            "rkeys=rkeys.cli:main",
        ],
    },
)
