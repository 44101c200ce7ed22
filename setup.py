from setuptools import setup, find_packages

setup(
    name="gridkit",
    version="0.1.0",
    packages=find_packages(exclude=["gridkit.tests"]),
    package_data={"gridkit": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid_viewer=gridkit.tools.grid_viewer:main",
        ]
    },
)
