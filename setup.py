from setuptools import find_packages, setup

setup(
    name="devprint",
    version="0.1.0-alpha",
    description="devprint - per-thread printf lowering for device tensor prints",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=["numpy", "tabulate"],
    extras_require={"test": ["pytest", "ml_dtypes"]},
)
