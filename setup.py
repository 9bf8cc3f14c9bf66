# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- STATE & CONFIG ---
    "pydantic>=2.0.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",

    # --- CONSOLE UI ---
    "rich>=13.0.0",
]

setup(
    name="viewstate",
    version="1.0.0",
    description="Observable state containers, selectors and lifecycle state for screen view models",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        # --- TESTS---
        "test": [
            "pytest",
            "pytest-asyncio==1.3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "viewstate-demo=viewstate.screens.main:cli",
        ],
    },
    python_requires=">=3.10",
)
