# coding: utf-8
from setuptools import find_packages, setup


with open('README.md', encoding='utf8') as file:
    long_description = file.read()

setup(
    name='microya',
    version='1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.8',
    license='MIT',
    description='Typed HTTP endpoint requests with plugins and a closed error taxonomy',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=[
        'httpx',
        'pydantic>=2,<2.13',
    ],
    extras_require={
        'requests': ['requests'],
        'test': ['pytest', 'requests'],
    },
)
