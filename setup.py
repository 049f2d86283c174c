import os
from setuptools import setup

from riffwave import __version__


HERE = os.path.abspath(os.path.dirname(__file__))
README = os.path.join(HERE, "README.rst")
TEST_REQS = os.path.join(HERE, "requirements-test.txt")

classifiers = [
    'License :: OSI Approved :: Apache Software License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Natural Language :: English',
    'Intended Audience :: Developers',
    'Intended Audience :: Science/Research',
    'Topic :: Multimedia :: Sound/Audio',
    'Programming Language :: Python :: 3',
]

with open(README, 'r') as f:
    long_description = f.read()

test_deps = []
with open(TEST_REQS, 'r') as f:
    test_deps = f.read().strip().split('\n')

setup(
    name='riffwave',
    version=__version__,
    description=('Decodes RIFF/WAVE audio files, in bulk or as a stream'),
    long_description=long_description,
    license='Apache 2.0',
    packages=['riffwave'],
    classifiers = classifiers,
    python_requires='>=3.6',
    install_requires=[],
    extras_require={'test': test_deps},
    entry_points={
        'console_scripts': ['riffwave=riffwave.__main__:main'],
    }
)
