from setuptools import setup, find_packages

setup(
    name='meeus',
    version='0.1.0',
    description='Astronomical algorithms after Jean Meeus: interpolation, Kepler\'s equation, orbits, conjunctions and seasons',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=['numpy >= 1.19.4'],
    extras_require={
        'jit': ['numba', 'scipy'],
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['meeus=meeus.cli:main'],
    },
)
