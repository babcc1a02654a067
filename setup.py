from setuptools import setup, find_packages

# Read requirements files
with open('requirements.txt') as f:
    core_requirements = [line for line in f.read().splitlines()
                        if line and not line.startswith('#') and not line.startswith('-r')]

setup(
    name="todolist",
    version="1.0.0",
    description="A command-line TODO list stored in a plain text file",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=core_requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'todo=todolist.todo:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
    ],
)
