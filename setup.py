from setuptools import setup, find_packages

setup(
    name='tmux-cluster',
    version='0.1.0',
    packages=find_packages(include=['tmuxcluster', 'tmuxcluster.*']),
    include_package_data=True,
    install_requires=[
        'typer',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'tmc=tmuxcluster.cli:app'
        ]
    },
    author='Your Name',
    description='Open a synchronized tmux pane for every host of a recursively defined cluster',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX',
    ],
    python_requires='>=3.8',
)
