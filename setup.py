from pathlib import Path

from setuptools import setup

long_description = (Path(__file__).parent / "README.md").read_text()

setup(
    name="nbs2dp",
    python_requires=">=3.10",
    description="Note Block Studio to Minecraft datapack converter with an animated note track",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=[
        "nbs2dp",
    ],
    entry_points={
        "console_scripts": [
            "nbs2dp = nbs2dp.cli:main",
        ]
    },
    license="MIT",
    version="0.1.0",
    install_requires=[
        "json5>=0.12.0",
        "pynbs>=1.1.0",
        "tqdm>=4.67.1"
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ]
    },
)
