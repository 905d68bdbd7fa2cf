import re
from setuptools import setup

with open('polylogpy/__init__.py') as f:
    VERSION = re.search(r"__version__ = '(.+)'", f.read()).group(1)

setup(
    name='polylogpy',
    packages=['polylogpy', ],
    version=VERSION,
    description='Dilogarithm, Clausen functions and negative eta table at double and long double precision',
    install_requires=[x.strip() for x in open('requirements.txt').readlines() if x.strip()],
    test_suite='tests',
    tests_require=[x.strip() for x in open('requirements_test.txt').readlines() if x.strip()],
    extras_require={
        'test': [x.strip() for x in open('requirements_test.txt').readlines() if x.strip()],
        'scripts': ['mpmath', 'matplotlib', 'tqdm'],
    },
    keywords=['dilogarithm', 'polylogarithm', 'clausen', 'special functions'],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
