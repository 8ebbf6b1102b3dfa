import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='toolshed',
    version='1.0.0',
    license='MIT',
    description='A small REST API for keeping track of tools.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'aiohttp>=3.8,<4',
        'aiohttp-apispec>=2.2',
        'aiohttp-cors>=0.7',
        'aiomonitor',
        'apispec>=5.1',
        'attrs',
        'marshmallow>=3.13,<4',
        'marshmallow-jsonschema>=0.13',
        'sentry-sdk',
        'tortoise-orm>=0.19,<1',
        'uvloop',
    ],
    extras_require={
        'test': [
            'pytest',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['toolshed=toolshed.cli:run'],
    },
)
