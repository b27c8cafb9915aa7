# ============================================================================
# xmlrpc-proxygen
# ============================================================================
# Generates an xmlrpc-c C++ proxy class from an XML-RPC server's
# introspection methods (system.listMethods, system.methodHelp,
# system.methodSignature).
#
# Usage:
#     xmlrpc-proxygen http://localhost/RPC2 sample SampleProxy > out.txt
#
# ============================================================================

from .version import __version__

__all__ = [
    "__version__",
]
