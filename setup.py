from setuptools import setup, find_packages


setup(
    name="text2babe",
    version="0.1",
    packages=find_packages(include=["text2babe", "text2babe.*"]),
    description="Authenticated text encryption with auto-detected hex/base64/binary encodings and a chat envelope format.",
    author="doc0x1",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "text2babe=text2babe.cli:main",
        ]
    },
)
