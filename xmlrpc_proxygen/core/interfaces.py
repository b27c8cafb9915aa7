"""
xmlrpc-proxygen - Core Interfaces
Abstract Base Class for the introspection facade

The collector only talks to a server through this contract, so any
compliant XML-RPC client (or a test double) can be substituted.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .schema import MethodSignature


# =============================================================================
# INTROSPECTION INTERFACE
# =============================================================================

class BaseIntrospectionClient(ABC):
    """
    Abstract Introspection Client

    Facade over the three read-only system.* queries of an XML-RPC server.
    Implementations perform no retries: any failure is raised as
    RemoteFaultError and ends the run.
    """

    def __init__(self, server_url: str):
        self.server_url = server_url

    @abstractmethod
    def list_methods(self) -> List[str]:
        """
        Return all method names known to the server (system.listMethods)

        Raises:
            RemoteFaultError: On any transport or protocol failure
        """
        pass

    @abstractmethod
    def method_help(self, name: str) -> str:
        """
        Return the documentation string of a method (system.methodHelp)

        Args:
            name: Full remote method name

        Returns:
            Help text, empty string if the server provides none

        Raises:
            RemoteFaultError: On any transport or protocol failure
        """
        pass

    @abstractmethod
    def method_signature(self, name: str) -> Optional[List[MethodSignature]]:
        """
        Return the signatures of a method (system.methodSignature)

        Args:
            name: Full remote method name

        Returns:
            List of MethodSignature, or None when the server declines to
            describe the method (e.g., answers "undef"). None is distinct
            from an empty list.

        Raises:
            RemoteFaultError: On any transport or protocol failure
            SignatureFormatError: If a reported signature is malformed
        """
        pass
