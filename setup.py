from setuptools import setup, find_packages


with open('README.rst') as readme_file:
    readme = readme_file.read()

# requirements
install_requires = list(x.strip() for x in open('requirements.txt') if x.strip())

# dev requirements
tests_require = list(x.strip() for x in open('dev_requirements.txt') if x.strip())

# *IMPORTANT*: Don't manually change the version here. Use the 'bumpversion' utility.
version = '0.1.0'

setup(
    name="staking-genesis",
    packages=find_packages(".", exclude=["tests", "*.tests", "*.tests.*"]),
    package_data={
        'staking_genesis': ['contracts/*.bin'],
    },
    description='Genesis storage layout for a predeployed PoS staking contract',
    long_description=readme,
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={
        'test': tests_require,
    },
    python_requires='>=3.8',
    version=version,
    classifiers=[
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
)
