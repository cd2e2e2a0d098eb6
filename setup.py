from setuptools import setup, find_packages

setup(
    name='seedmerge',
    version='0.1.0',
    packages=find_packages(exclude=['seedmerge.tests']),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'seedmerge=seedmerge.cli:main'
        ]
    },
    description='Merge seed server entries into an MCP registry JSON file',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
