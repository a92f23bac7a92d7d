"""
Setup script for the ESLint Suppression Audit package.
"""

from setuptools import setup, find_packages
import os

# Read the README
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "Audit which ESLint rules are suppressed across a source tree."

setup(
    name="suppressaudit",
    version="1.0.0",
    author="Suppression Audit Team",
    author_email="suppressaudit@example.com",
    description="Report eslint-disable directives in a source tree as CSV",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/suppressaudit/suppressaudit",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "mypy>=1.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "suppressaudit=suppressaudit.cli:main",
            "eslint-suppressions=suppressaudit.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="eslint, lint, suppression, static-analysis, code-quality, report",
    project_urls={
        "Bug Reports": "https://github.com/suppressaudit/suppressaudit/issues",
        "Source": "https://github.com/suppressaudit/suppressaudit",
    },
)
