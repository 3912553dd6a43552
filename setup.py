import os
from setuptools import setup


# Utility function to read the README file.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname), encoding='utf-8') as f:
        return f.read()

setup(
    name='alloycalc',
    description='Analytic diffusion profiles and preview calculations for binary/ternary alloy systems.',
    packages=['alloycalc', 'alloycalc.tests', 'alloycalc.diffusion', 'alloycalc.thermo'],
    license='MIT',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    version='0.1.0',
    python_requires='>=3.9',
    install_requires=[
        'matplotlib>=3.3',
        'numpy>=1.17',
        'scipy',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Physics',
        'Topic :: Scientific/Engineering :: Chemistry',

        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

)
