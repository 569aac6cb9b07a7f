from setuptools import setup, find_packages

setup(
    name="expo-updates-manifest",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "fastapi>=0.110",
        "starlette>=0.36",
        "uvicorn>=0.29",
        "pydantic>=2.5",
        "httpx>=0.27",
        "structlog>=24.1",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "pytest-httpx>=0.30",
        ],
    },
    entry_points={
        "console_scripts": [
            "expo-updates-manifest=expo_updates_manifest.core.cli:main",
        ],
    },
    description="Development server endpoint serving Expo Updates manifests.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
