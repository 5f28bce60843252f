"""Разбор аргументов командной строки и справка."""
