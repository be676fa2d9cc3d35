"""Salvo: console naval battle with pattern attacks."""
