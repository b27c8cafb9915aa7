"""
XML-RPC Introspection Client
Concrete BaseIntrospectionClient over the standard xmlrpc.client transport

All wire work (HTTP, XML encoding, fault signaling) is delegated to
xmlrpc.client.ServerProxy. This module only issues the three system.*
queries and translates every failure into a RemoteFaultError.
"""

import http.client
import xmlrpc.client
from typing import Any, List, Optional
from xml.parsers.expat import ExpatError

from loguru import logger

from ..core.exceptions import RemoteFaultError
from ..core.interfaces import BaseIntrospectionClient
from ..core.schema import MethodSignature

# ============================================================================
# FAULT CODES
# ============================================================================
# Interoperability fault codes for failures the server did not report itself
# (http://xmlrpc-epi.sourceforge.net/specs/rfc.fault_codes.php)

PARSE_ERROR = -32700
INVALID_RESPONSE = -32600
TRANSPORT_ERROR = -32300


class XmlRpcIntrospectionClient(BaseIntrospectionClient):
    """
    Introspection client backed by xmlrpc.client.ServerProxy

    Example:
        ```python
        client = XmlRpcIntrospectionClient("http://localhost:8080/RPC2")
        for name in client.list_methods():
            print(name, client.method_signature(name))
        ```
    """

    def __init__(self, server_url: str, proxy: Optional[xmlrpc.client.ServerProxy] = None):
        super().__init__(server_url)
        self._proxy = proxy or xmlrpc.client.ServerProxy(server_url, allow_none=True)

    def list_methods(self) -> List[str]:
        result = self._call("system.listMethods")
        if not isinstance(result, list) or not all(isinstance(n, str) for n in result):
            raise RemoteFaultError(
                INVALID_RESPONSE,
                f"system.listMethods returned {type(result).__name__}, expected array of strings",
                "system.listMethods"
            )
        return result

    def method_help(self, name: str) -> str:
        result = self._call("system.methodHelp", name)
        return result if isinstance(result, str) else ""

    def method_signature(self, name: str) -> Optional[List[MethodSignature]]:
        result = self._call("system.methodSignature", name)
        if not isinstance(result, list):
            # Usually the string "undef": the server won't describe the method
            logger.debug("No signature list for {}: server answered {!r}", name, result)
            return None
        return [MethodSignature.from_wire(entry) for entry in result]

    def _call(self, method_name: str, *args: Any) -> Any:
        """
        Issue one remote call, mapping every failure to RemoteFaultError

        Args:
            method_name: Full remote name (e.g., 'system.methodHelp')
            *args: Positional call parameters

        Returns:
            Decoded XML-RPC result

        Raises:
            RemoteFaultError: For faults, HTTP errors, malformed responses
                and connection failures alike
        """
        logger.debug("Calling {}{} on {}", method_name, args, self.server_url)
        method = getattr(self._proxy, method_name)
        try:
            return method(*args)
        except xmlrpc.client.Fault as e:
            raise RemoteFaultError(e.faultCode, e.faultString, method_name)
        except xmlrpc.client.ProtocolError as e:
            raise RemoteFaultError(e.errcode, f"{e.url}: {e.errmsg}", method_name)
        except (xmlrpc.client.ResponseError, ExpatError) as e:
            raise RemoteFaultError(PARSE_ERROR, f"Malformed response: {e}", method_name)
        except (OSError, http.client.HTTPException) as e:
            code = getattr(e, "errno", None) or TRANSPORT_ERROR
            raise RemoteFaultError(
                code,
                f"Cannot reach {self.server_url}: {e}",
                method_name
            )
