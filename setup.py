from setuptools import setup, find_packages

__version__ = "1.0.0"

requirements = [
    "fastapi",
    "dependency-injector>=4.0,<5.0",
    "pydantic>=2.0",
    "jinja2",
    "markupsafe",
]

setup(
    name="encore-assets",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"encore_assets": "encore_assets"},
    install_requires=requirements,
    extras_require={
        "dev": [
            "black",
            "uvicorn",
            "pylint",
            "mypy",
            "coverage",
            "pytest",
            "pytest-mock",
            "httpx",
        ]
    },
)
