"""Domain types of the installer.

Pure data and error types; no HTTP, filesystem or CLI code lives here.
"""
