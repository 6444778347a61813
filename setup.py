# setup.py
from setuptools import setup, find_packages

setup(
    name="yisp",
    version="0.1.0",
    description="A minimal Lisp: reader, evaluator, printer, REPL and language server",
    packages=find_packages(include=["yisp", "yisp.*", "yisp_lsp", "yisp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "yisp=yisp.__main__:main",
            "yisp-ls=yisp_lsp.server:main",
            "yisp-repl-server=yisp_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
