"""Interfaces of the Core.

Protocols implemented by concrete adapters, so the install pipeline depends
on contracts rather than on httpx directly.
"""
