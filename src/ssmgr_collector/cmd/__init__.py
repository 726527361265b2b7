"""Command line interface modules.

This package provides the plugin entry point that the shadowsocks host
launches. It resolves the collector configuration once at startup and
reports configuration errors to the operator.
"""
