from setuptools import setup, find_packages

setup(
    name="youtube_synthesis",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.29.0",
        "pydantic>=2.5",
        "httpx>=0.27.0",
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "colorlog>=6.8.0",
        "youtube-transcript-api>=1.0.0",
        "langchain-core>=0.2.0",
        "langchain-openai>=0.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "youtube-synthesis-api=youtube_synthesis_api.app:main",
        ],
    },
    python_requires=">=3.9",
    description="FastAPI backend that analyzes YouTube videos and synthesizes themes and titles across them",
    author="Venkatesh Murugadas",
)
