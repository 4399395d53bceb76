"""
Setuptools based setup module
"""
from setuptools import setup, find_packages

setup(
    name='autopresenter',
    version='0.1.0',
    description='autopresenter - view-model decorators that filter and forward access to domain objects.',
    long_description='Presenters wrap a resource, restrict which of its fields are visible and convert it to a dict.',

    author='Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department',
    license='BSD',

    classifiers=['Development Status :: 4 - Beta',
                 'Topic :: Software Development :: Libraries',
                 'License :: OSI Approved :: BSD License',
                 'Intended Audience :: Developers',
                 'Operating System :: OS Independent',
                 'Programming Language :: Python :: 3.9',
                 'Programming Language :: Python :: 3.10',
                 'Programming Language :: Python :: 3.11',
                 'Programming Language :: Python :: 3.12'
                ],

    keywords='presenter decorator view-model',
    packages=find_packages(exclude=["*tests*", "*docs*"]),
    python_requires='>=3.9',
    install_requires=[
        'numpy',
        'pandas',
        'pyiron_snippets',
    ],
    extras_require={
        'test': ['pytest'],
    },
    )
