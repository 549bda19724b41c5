from setuptools import setup, find_packages

setup(
    name="clearwrite",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "openai",
        "requests",
        "python-dotenv",
        "pyyaml",
        "colorama",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest", "httpx"],
    },
    entry_points={
        "console_scripts": [
            "clearwrite=clearwrite.cli:main",
        ],
    },
    author="tsilva",
    description="A writing assistant that rewrites text to be clearer using Gemini",
    keywords="writing, rewrite, gemini, llm",
    python_requires=">=3.8",
)
