from setuptools import setup
setup(
    name='artie-interface',
    version="0.1.0",
    python_requires=">=3.11",
    license="MIT",
    description="Artie interface library for declaring and checking interface conformance",
    packages=["artie_interface"],
    package_dir={"artie_interface": "src/artie_interface"},
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
)
