"""
Installation setup for ootv
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("ootv/resources/ootv.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))

setuptools.setup(
    name="ootv",
    version=config.get("OOTV", "version", fallback="1.0.0+fallback"),
    description="Oracle of the Void card scraper and L5R deck analyser",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read()
    if project_root.joinpath("README.md").is_file()
    else "",
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python",
        "Topic :: Games/Entertainment",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "L5R",
        "Legend of the Five Rings",
        "Oracle of the Void",
        "Trading Cards",
    ],
    python_requires=">=3.8",
    include_package_data=True,
    package_data={"ootv": ["resources/*.properties"]},
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={
        "test": project_root.joinpath("requirements_test.txt")
        .open(encoding="utf-8")
        .readlines()
        if project_root.joinpath("requirements_test.txt").is_file()
        else [],
    },
    entry_points={"console_scripts": ["ootv=ootv.__main__:main"]},
)
