from setuptools import setup, find_packages

setup(
    name = 'wordcount',
    version = '0.1.0',
    license = 'Apache Software License (ASF)',
    packages = find_packages(exclude=['tests']),
    entry_points = {
        'console_scripts': [
            'wordcount = wordcount.cmd:execute_and_exit',
        ]
    },
    zip_safe = True,
    python_requires = '>=3.6',
    install_requires = [],
    extras_require = {
        'test': ['pytest'],
    },
)
