#!/usr/bin/env python

from setuptools import setup

__author__ = 'Yusuke Miyazaki <miyazaki.dev@gmail.com>'
__version__ = '0.1'

requires = [
    'numpy>=1.17.0',
    'Pillow>=8.0.0'
]

tests_require = [
    'pytest>=6.0'
]


setup(
    name='meshproj',
    version=__version__,
    author=__author__,
    author_email='miyazaki.dev@gmail.com',
    description='Project mesh faces, vertices and normals onto a coarse '
                'image',
    packages=['meshproj'],
    install_requires=requires,
    extras_require={'test': tests_require},
    python_requires='>=3.6',
    entry_points={
        'console_scripts': ['meshproj = meshproj.cli:main']
    },
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3'
    ]
)
