#!/usr/bin/env python

from setuptools import setup


# Modified from http://stackoverflow.com/questions/2058802/
# how-can-i-get-the-version-defined-in-setup-py-setuptools-in-my-package
def version():
    import os
    import re

    init = os.path.join('src', 'prot', '__init__.py')
    with open(init) as fp:
        initData = fp.read()
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]",
                      initData, re.M)
    if match:
        return match.group(1)
    else:
        raise RuntimeError('Unable to find version string in %r.' % init)


scripts = [
    'bin/rna-to-protein.py',
]

setup(name='rna-prot',
      version=version(),
      packages=['prot'],
      package_dir={'': 'src'},
      keywords=['RNA', 'codon', 'translation', 'protein'],
      classifiers=[
          'Programming Language :: Python :: 3',
          'Development Status :: 4 - Beta',
          'Intended Audience :: Science/Research',
          'License :: OSI Approved :: MIT License',
          'Operating System :: OS Independent',
          'Topic :: Scientific/Engineering :: Bio-Informatics',
      ],
      license='MIT',
      description='Translate RNA sequences to proteins',
      python_requires='>=3.10',
      scripts=scripts,
      install_requires=[
          'biopython>=1.71',
          'progressbar2>=3.53.1',
      ],
      extras_require={
          'test': [
              'pytest',
          ],
      })
