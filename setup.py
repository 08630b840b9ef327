"""A setuptools based setup module."""

# See:
# https://packaging.python.org/
# https://packaging.python.org/tutorials/packaging-projects/
# https://setuptools.readthedocs.io/en/latest/setuptools.html

from setuptools import find_packages, setup


# Get the long description from the README file
with open('README.rst') as f:
    long_description = f.read()

setup(
    name='rlbplib',
    version='0.1.0.dev1',
    description='Rotation invariant uniform LBP texture histograms',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Image Recognition',
        'Topic :: Utilities',
    ],
    keywords='texture lbp local binary pattern histogram',

    python_requires='>=3.8',
    # https://packaging.python.org/en/latest/requirements.html
    install_requires=[
        'joblib',
        'numpy',
        'scikit-image',
    ],
    extras_require={
        'test': ['pytest'],
    },

    packages=find_packages(exclude=['tests']),

    entry_points={
        'console_scripts': [
            'get_rlbp=rlbp.tools.get_rlbp:main',
        ],
    },
)
