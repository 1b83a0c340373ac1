"""Layout, text drawing, GML export and PNG drawing for control-flow graphs of bytecode."""

__version__ = "0.1.0"