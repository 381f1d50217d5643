# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="templatetree",
    version="0.1.0",
    description="Convierte un árbol de directorios en una estructura de plantilla JSON y viceversa",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["templatetree", "templatetree.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'templatetree=templatetree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
