"""ts-cycles: report import cycles among the modules of a TypeScript project."""

__version__ = "0.1.0"
