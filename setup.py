from setuptools import setup, find_packages
import os

def read_requirements(path):
    with open(path, "r") as f:
        return [line.strip() for line in f.readlines()
                if line.strip() and not line.startswith("#")]

# Read requirements from requirements.txt
requirements = read_requirements("requirements.txt")
test_requirements = read_requirements("requirements-test.txt")

# Read README for long description
with open("README.md", "r") as f:
    long_description = f.read()

# Get version (create a VERSION file for easier updates)
version = "0.1.0"  # Default version
if os.path.exists("VERSION"):
    with open("VERSION", "r") as f:
        version = f.read().strip()

setup(
    name="teacher-evaluation-server",
    version=version,
    description="A teacher evaluation server that classifies student feedback and aggregates results",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "*.tests", "*.tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "evalserver=evalserver.main:run_server",
        ],
    },
)
