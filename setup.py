from setuptools import setup, find_packages

setup(
    name="themeline",
    version="0.1.0",
    description="Align per-theme token ranges and emit shared CSS class names for multi-theme code rendering",
    packages=find_packages(include=["themeline", "themeline.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
