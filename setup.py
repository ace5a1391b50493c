from setuptools import setup, find_packages

setup(
    name='registryctl',
    version='0.1.0',
    packages=find_packages(exclude=['registryctl.tests']),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'fastapi',
        'uvicorn',
        'kubernetes',
        'PyYAML',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
            'jsonschema',
            'httpx',
        ],
    },
    entry_points={
        'console_scripts': [
            'registryctl=registryctl.cli:app'
        ]
    },
    description='CLI and API for provisioning a private container registry on Kubernetes',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
