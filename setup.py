from setuptools import setup
from featurescan import __version__

setup(
    name="featurescan",
    long_description="featurescan extracts features, scenarios and steps from Gherkin .feature files "
    "written in any Gherkin dialect and normalizes them to English keywords.",
    version=__version__,
    packages=[
        "featurescan",
        "featurescan.commands",
        "featurescan.readers",
        "featurescan.data_classes",
        "featurescan.logging",
    ],
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "click>=8.1.0,<9.0.0",
        "pyyaml>=6.0.0,<7.0.0",
        "pyserde>=0.12.0",
        "tqdm>=4.65.0,<5.0.0",
        "beartype>=0.17.0,<1.0.0",
        "gherkin-official>=24.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
        ],
    },
    entry_points="""
        [console_scripts]
        featurescan=featurescan.cli:cli
    """,
)
