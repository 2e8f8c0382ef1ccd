from setuptools import setup, find_packages
import re

# Read version from gapihub/__init__.py
with open('gapihub/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='gapihub',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'google-auth',
        'requests',
        'tenacity>=8.0',
        'pydantic>=2.0',
        'python-dotenv',
        'click>=8.0',
        'PyYAML',
        'click_option_group',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'gapihub=gapihub.cli.__main__:main',
        ],
    },
    author='CLI Developer',
    description='gapihub - typed clients and a command line for Google REST APIs.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
