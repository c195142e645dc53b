from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'iconfig',
    version = '0.1.0',
    description = 'Layered configuration with precedence merging and reload notification',
    packages = find_packages(include=['iconfig', 'iconfig.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest', 'pytest-cov']
    }
)
