"""One-class-per-file DTO implementations re-exported by ``base.models``."""
