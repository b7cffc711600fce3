"""Test suite for snipsmart.

Covers the JSON and tag extraction engines, the sanitizer, format dispatch,
configuration, and the CLI. Tests exercise behavior through the public
functions and replace I/O at the boundaries (stdin, files, environment).
"""
