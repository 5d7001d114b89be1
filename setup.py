from setuptools import setup, find_packages

'''
Notes: This is the setup file for the NetPlus telemetry collector.
It defines the package metadata and dependencies required for installation.
'''

setup(
    name = "netplus",
    version = "1.0.0",
    description= "NetPlus - Host network and security telemetry collector",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires='>=3.10',
    install_requires=[
        # Core
        "fastapi",
        "uvicorn[standard]",
        "pydantic>=2",
        "PyYAML",
        "python-dotenv",

        # System
        "psutil",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
