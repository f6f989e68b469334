from setuptools import setup, find_packages

setup(
    # == Package info ==
    name = 'mclustering',
    version = '0.1.0',
    description = 'Markov Clustering (MCL) of weighted graphs on dense numpy matrices.',
    license = "MIT",
    python_requires = '>=3.8',
    packages = find_packages(exclude = ["tests", "tests.*"]),
    zip_safe = True,
    # == Dependencies ==
    install_requires = [
        "numpy",
        "tqdm",
    ],
    extras_require = {
        "test" : [
            "pytest",
        ]
    },
)
