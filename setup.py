#!/usr/bin/env python3
"""Setup script for the letter house service."""

from setuptools import find_packages, setup

setup(
    name="letterhouse",
    version="0.1.0",
    description="Houses of letter windows that open after Christmas",
    packages=find_packages(include=["letterhouse", "letterhouse.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite>=0.19",
        "asyncpg>=0.29",
        "python-jose[cryptography]>=3.3",
        "tzdata",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.26",
            "faker>=22.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "letterhouse=letterhouse.main:run",
        ],
    },
)
