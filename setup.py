#!/usr/bin/env python3
# encoding: utf-8

from setuptools import setup

import re
with open('geomatrix/__init__.py') as file:
    version_pattern = re.compile("__version__ = '(.*)'")
    version = version_pattern.search(file.read()).group(1)

with open('README.rst') as file:
    readme = file.read()

setup(
    name='geomatrix',
    version=version,
    author='Kale Kundert and Alex Mitchell',
    author_email='kale@thekunderts.net',
    description='Pairwise relations between points, segments, rects, and circles.',
    long_description=readme,
    packages=[
        'geomatrix',
    ],
    include_package_data=True,
    install_requires=[
            'nonstdlib',
            'docopt',
    ],
    extras_require={
            'tests': [
                'pytest',
                'pytest-cov',
            ],
    },
    entry_points={
            'console_scripts': [
                'geomatrix=geomatrix.cli:main',
            ],
    },
    license='MIT',
    zip_safe=False,
    keywords=[
        'geometry',
        'collision',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Games/Entertainment',
    ],
)
