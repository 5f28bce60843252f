"""Пакет boxi: очистка ресурсов Docker из командной строки."""

__all__ = ["__version__"]

__version__ = "0.3.0"
