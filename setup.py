from setuptools import setup

setup(
    name="adjgraph",
    version="0.1.0",
    description="Directed graphs in adjacency list form",
    license="MIT",
    packages=["adjgraph", "adjgraph.templates"],
    python_requires=">=3.7",
    install_requires=["Jinja2>=3", "PyYAML>=5.1"],
    extras_require={"test": ["pytest>=7"]},
    package_data={"adjgraph.templates": ["*.jinja"]},
    entry_points={"console_scripts": ["adjgraph = adjgraph.cli:main"]},
)
