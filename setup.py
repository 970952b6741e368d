from setuptools import setup, find_packages
setup(
    name='logbinning',
    version='0.1',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        'Numpy>=1.17.0',
        'scipy>=1.0',
    ],
)
