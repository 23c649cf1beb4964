from setuptools import setup, find_packages

setup(
    name="naat-search",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.0",
        "fastapi",
        "uvicorn",
        "slowapi",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
