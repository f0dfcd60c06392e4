# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fsnavigator",
    version="1.0.0",
    description="Navegador interactivo de un sistema de ficheros simulado en memoria",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fsnavigator", "fsnavigator.*"]),
    package_data={
        "fsnavigator.interface.locales": ["*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fsnavigator=fsnavigator.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
