# setup.py
from setuptools import setup, find_packages

setup(
    name="minirack",
    version="0.1.0",
    description="A tree-walking evaluator for a small functional subset of Racket",
    packages=find_packages(include=["minirack", "minirack.*", "minirack_lsp", "minirack_lsp.*"]),
    package_data={"minirack": ["prelude/*.rkt"]},
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2.0",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "minirack=minirack.repl:main",
            "minirack-ls=minirack_lsp.server:main",
            "minirack-repl-server=minirack_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
