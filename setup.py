from setuptools import setup, find_packages

setup(
    name="glowboard",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi==0.109.2",
        "uvicorn==0.27.1",
        "sqlalchemy[asyncio]==2.0.27",
        "asyncpg==0.29.0",
        "python-dotenv==1.0.1",
        "alembic==1.13.1",
        "pydantic==2.6.1",
        "pydantic-settings==2.1.0",
        "python-jose[cryptography]==3.3.0",
        "strawberry-graphql[fastapi]==0.219.2",
    ],
    extras_require={
        "test": [
            "pytest==8.0.0",
            "pytest-asyncio==0.23.5",
            "httpx==0.26.0",
            "aiosqlite==0.19.0",
        ],
    },
)
