"""Film, cinema and actor catalogues and a cinema screening schedule, kept in plain text files."""

__version__ = "0.1.0"