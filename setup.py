from setuptools import setup, find_packages
import os

# Read the README file for long description
readme_path = os.path.join(os.path.dirname(__file__), "README.md")
try:
    with open(readme_path, "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "To-Do CLI - Menu-driven command-line to-do list backed by a JSON file"

# Read requirements from requirements.txt
requirements_path = os.path.join(os.path.dirname(__file__), "requirements.txt")
try:
    with open(requirements_path, "r", encoding="utf-8") as f:
        requirements = []
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                # Remove inline comments
                req = line.split("#")[0].strip()
                if req:
                    requirements.append(req)
except FileNotFoundError:
    requirements = [
        "typer>=0.9.0",
        "rich>=13.5.2",
        "python-dotenv>=1.0.0",
        "python-dateutil>=2.8.2",
    ]

setup(
    name="todocli",
    version="1.0.0",
    author="To-Do CLI Team",
    description="To-Do CLI - Add, view, toggle, edit, delete and filter tasks from an interactive terminal menu",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Office/Business :: Scheduling",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Environment :: Console",
        "Natural Language :: English",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.1.3",
            "pytest-mock>=3.10.0",
        ],
        "dev": [
            "pytest>=7.1.3",
            "pytest-mock>=3.10.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "todocli=todocli.todocli:app",
        ],
    },
    keywords="todo to-do task-management cli productivity",
    zip_safe=False,
)
