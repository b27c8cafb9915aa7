"""
xmlrpc-proxygen - Core Module
Interfaces, exceptions and schemas
"""

from .exceptions import *
from .interfaces import BaseIntrospectionClient
from .schema import (
    TypeTag,
    CommandLineArgs,
    MethodSignature,
    MethodDescriptor,
    ProxyClassModel,
)

__all__ = [
    'BaseIntrospectionClient',
    'TypeTag',
    'CommandLineArgs',
    'MethodSignature',
    'MethodDescriptor',
    'ProxyClassModel',
    'ProxyGenException',
    'IntrospectionException',
    'RemoteFaultError',
    'SignatureFormatError',
    'GenerationError',
]
