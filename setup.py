from setuptools import setup, find_packages

setup(
    name="cashflow_valuation",
    version="0.1.0",
    description="Present value and fixed-coupon bond pricing under discrete and continuous compounding",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cashflow-valuation=cashflow_valuation.cli:main",
        ],
    },
    python_requires=">=3.8",
)
