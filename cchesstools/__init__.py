"""Chess engine tooling: UCI engine driver, opponent configs, STS parsing, match reports and string helpers."""

__version__ = "0.1.0"