from setuptools import setup, find_packages

setup(
    name="strength_tracker",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.24.0",
        "plotly>=5.15.0",
        "dash>=2.14.0",
        "dash-bootstrap-components>=1.4.0",
        "flask>=2.2.0",
        "flask-compress>=1.13",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "strength-tracker=strength_tracker.cli:main",
        ],
    },
    python_requires=">=3.8",
)
