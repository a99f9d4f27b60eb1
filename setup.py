from setuptools import find_namespace_packages, setup


setup(
    name="mdmerge",
    version="1.0.0",
    description="Merge a markdown tree into a single file and estimate its token count",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mdmerge", "mdmerge.*"]),
    install_requires=["tiktoken>=0.5"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["mdmerge=mdmerge.cli:main"]},
)
