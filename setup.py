from setuptools import setup, find_packages


setup(
    version="0.1.0",
    name="corenetworking",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "aiohttp>=3.8.0",
        # `yarl` and `multidict` come with `aiohttp`, we use them directly.
        "yarl>=1.8.0",
        "multidict>=6.0.0",
        "orjson>=3.6.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "httpx": ["httpx>=0.23.0"],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.23.0",
            "typing_extensions>=4.6.0",
        ],
    },
)
