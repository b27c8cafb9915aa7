"""
xmlrpc-proxygen - Method Collector
Core logic for turning a server's introspection answers into a ProxyClassModel

This module bridges the introspection client with the code emitters.
"""

from typing import Tuple

from loguru import logger

from ..core.interfaces import BaseIntrospectionClient
from ..core.schema import MethodDescriptor, ProxyClassModel

SEPARATOR = "."


def split_method_name(name: str) -> Tuple[str, str]:
    """
    Break a remote method name into (prefix, local name) at the last dot

    Examples:
        'a.b.c'  -> ('a.b', 'c')
        'ping'   -> ('', 'ping')
    """
    prefix, _, local_name = name.rpartition(SEPARATOR)
    return prefix, local_name


class ProxyClassCollector:
    """
    Proxy Class Collector - Queries a server and builds the class model

    Responsibilities:
    - List the server's methods
    - Keep those whose prefix matches the requested one
    - Fetch help and signatures for each kept method
    - Skip, with a warning, methods the server won't describe
    """

    def __init__(self, client: BaseIntrospectionClient):
        self.client = client

    def collect(self, desired_prefix: str, class_name: str) -> ProxyClassModel:
        """
        Build the model of the proxy class

        Args:
            desired_prefix: Exact prefix to keep ('' keeps unprefixed methods)
            class_name: Name of the class to generate

        Returns:
            ProxyClassModel whose methods follow the server's listing order

        Raises:
            RemoteFaultError: If any introspection call fails
            SignatureFormatError: If a reported signature is malformed
        """
        model = ProxyClassModel(class_name=class_name)

        method_names = self.client.list_methods()
        logger.debug("Server reports {} methods", len(method_names))

        for method_name in method_names:
            prefix, local_name = split_method_name(method_name)
            if prefix != desired_prefix:
                continue

            help_text = self.client.method_help(method_name)
            signatures = self.client.method_signature(method_name)

            if signatures is None:
                logger.warning(
                    "Skipping method {} because server does not report any "
                    "signatures for it (via system.methodSignature method)",
                    method_name
                )
                continue
            if not signatures:
                logger.warning(
                    "Skipping method {} because server reports an empty "
                    "signature list for it",
                    method_name
                )
                continue

            model.add_method(MethodDescriptor(
                local_name=local_name,
                remote_name=method_name,
                help_text=help_text,
                signatures=tuple(signatures),
            ))

        logger.debug(
            "Collected {} methods with prefix {!r} for class {}",
            len(model.methods), desired_prefix, class_name
        )
        return model
