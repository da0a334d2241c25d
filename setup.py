from setuptools import find_packages, setup

setup(
    name="autoupdate",
    version="0.1.0",
    description="Keep Homebrew up to date with a per-user launchd agent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration and output schemas
        "typer",  # Command line interface
        "click",  # Typer's underlying CLI toolkit (context lookup)
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for generated files and CLI outputs
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "autoupdate=autoupdate.cli:main",
        ],
    },
)
