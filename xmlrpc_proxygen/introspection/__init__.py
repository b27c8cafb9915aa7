"""
xmlrpc-proxygen - Introspection Module
Clients that query a server's system.* methods
"""

from .xmlrpc_client import XmlRpcIntrospectionClient

__all__ = [
    'XmlRpcIntrospectionClient',
]
