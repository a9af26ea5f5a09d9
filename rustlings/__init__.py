"""Terminal styling, rust-analyzer project generation and reference solutions for Rust exercises."""

__version__ = "5.4.1"