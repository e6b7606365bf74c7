from setuptools import setup, find_packages

setup(
    name="qreg",
    version="0.1.0",
    description="Dense state-vector simulation of qubit registers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21",
        "scipy>=1.7",
        "qiskit>=0.45",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
)
