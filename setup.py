from setuptools import setup, find_packages

setup(
    name='kubesetctx',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'kubernetes',
        'PyYAML',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
            'jsonschema',
        ]
    },
    entry_points={
        'console_scripts': [
            'kubesetctx=kubesetctx.cli:run'
        ]
    },
    description='Build a kubeconfig from CI/CD action inputs and point KUBECONFIG at it',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
