"""
ShopAudit - single-page SEO auditor for e-commerce storefronts
"""
from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="shopaudit",
    version="2.0.0",
    description="Single-page SEO auditor for e-commerce storefronts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["core", "core.*", "d0_gateway", "d0_gateway.*", "d1_audit", "d1_audit.*"]),
    py_modules=["main"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Internet :: WWW/HTTP :: Site Management",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "shopaudit=core.cli:main",
        ],
    },
)
