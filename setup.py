from setuptools import setup, find_packages
from os import path
from time import time

here = path.abspath(path.dirname(__file__))

if path.exists(path.join(here, "VERSION.txt")):
    # this file can be written by CI tools (e.g. Travis)
    with open(path.join(here, "VERSION.txt")) as version_file:
        version = version_file.read().strip().strip("v")
else:
    version = str(time())

with open(path.join(here, 'requirements.in')) as requirements_file:
    install_requires = requirements_file.read().strip().split('\n')

setup(
    name='manifest-annotations',
    version=version,
    description='''Structured moniker, artifact and relationship annotations for Kubernetes manifests''',
    license='MIT',
    packages=find_packages(exclude=['examples', 'tests', 'tests.*', '.tox']),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
      'console_scripts': [
        'manifest-annotations = manifest_annotations.cli:main',
        'mfa = manifest_annotations.cli:main',
      ]
    },
)
