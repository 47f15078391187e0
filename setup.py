from setuptools import setup, find_packages

setup(
    name="pulse-reviews",
    version="1.0.0",
    description="PULSE - Professor Undergrad Learning & Student Evaluations",
    packages=find_packages(include=["pulse", "pulse.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "psycopg2-binary",
        "passlib[bcrypt]",
        "bcrypt<4.1",  # passlib 1.7 breaks on newer bcrypt releases
        "pydantic[email]>=2.0",
        "pydantic-settings",
        "python-dotenv",
        "alembic",
        "requests",
    ],
    extras_require={
        "frontend": ["streamlit"],
        "test": ["pytest", "httpx"],
    },
)
