"""
Pomotimer - Pomodoro timer backend: authentication and per-user settings
"""
from setuptools import setup, find_packages

setup(
    name="pomotimer",
    version="1.0.0",
    description="Pomodoro timer backend: authentication and per-user settings",
    author="Pomotimer Team",
    packages=find_packages(include=["pomotimer_core", "pomotimer_core.*", "app", "app.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "sqlalchemy>=2.0.0",
        "psycopg2-binary>=2.9.0",
        "pydantic[email]>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-jose[cryptography]>=3.3.0",
        "bcrypt>=4.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "httpx>=0.24.0",
        ],
    },
)
