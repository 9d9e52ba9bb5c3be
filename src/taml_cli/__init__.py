"""
taml-cli: convert ANSI terminal output to TAML markup

Pipe colored output from builds, logs, test runners or git into the
``taml-cli`` command and get tag-based markup back.

Quick Start:
    $ echo -e "\\e[31mError\\e[0m" | taml-cli
    <red>Error</red>

    >>> import taml_cli
    >>> taml_cli.encode("\\x1b[1m\\x1b[34mBuild\\x1b[0m")
    '<bold><blue>Build</blue></bold>'
"""

__version__ = "0.1.0"

from taml_cli.codec.taml_encoder import EncodeError, TamlEncoder, encode

__all__ = [
    "__version__",
    "EncodeError",
    "TamlEncoder",
    "encode",
]
