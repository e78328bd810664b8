"""Setup configuration for e2e-framework package."""

from setuptools import setup, find_packages

setup(
    name="e2e-framework",
    version="0.1.0",
    description="Browser end-to-end test framework with Playwright page objects and seeded test data builders",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "playwright>=1.40.0",
        "Faker>=20.0.0",
        "faker-commerce>=1.0.3",
        "pytest>=7.4.0",
        "pytest-asyncio>=0.21.0",
    ],
    extras_require={
        "dev": [
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.11.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "black>=23.0.0",
        ],
    },
)
