# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="verif",
    version="0.1.0",
    description="Dependency graph analyzer for Vue single-file components",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["verif", "verif.*"]),
    package_data={
        "verif.interface.server": ["templates/*.html", "templates/*.js"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "Flask>=2.2",  # Graph preview server (Jinja2 templates)
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'verif=verif.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
