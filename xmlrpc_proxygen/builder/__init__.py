"""
xmlrpc-proxygen - Builder Module
Collects a server's methods and renders the proxy class
"""

from .collector import ProxyClassCollector, split_method_name
from .cpp_emitter import render_declaration, render_definition

__all__ = [
    'ProxyClassCollector',
    'split_method_name',
    'render_declaration',
    'render_definition',
]
