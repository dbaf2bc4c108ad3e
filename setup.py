# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="webstudio4ai",
    version="1.0.0",
    description="Interactive AI web studio: describe changes in natural language and apply them to an in-memory project",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["webstudio4ai", "webstudio4ai.*"]),
    python_requires=">=3.9",
    install_requires=[
        "google-genai",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'webstudio4ai=webstudio4ai.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
