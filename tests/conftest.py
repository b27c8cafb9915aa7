import threading
from typing import Dict, List, Optional, Tuple
from xmlrpc.server import SimpleXMLRPCServer

import pytest
from loguru import logger

from xmlrpc_proxygen.core.interfaces import BaseIntrospectionClient
from xmlrpc_proxygen.core.schema import MethodSignature


class FakeIntrospectionClient(BaseIntrospectionClient):
    """In-memory server: name -> (help text, wire signatures or 'undef')"""

    def __init__(self, methods: List[Tuple[str, str, object]], server_url="http://fake/RPC2"):
        super().__init__(server_url)
        self.names = [name for name, _, _ in methods]
        self.help: Dict[str, str] = {name: help_text for name, help_text, _ in methods}
        self.signatures: Dict[str, object] = {name: sigs for name, _, sigs in methods}
        self.calls: List[Tuple[str, str]] = []

    def list_methods(self) -> List[str]:
        self.calls.append(("listMethods", ""))
        return list(self.names)

    def method_help(self, name: str) -> str:
        self.calls.append(("methodHelp", name))
        return self.help[name]

    def method_signature(self, name: str) -> Optional[List[MethodSignature]]:
        self.calls.append(("methodSignature", name))
        raw = self.signatures[name]
        if not isinstance(raw, list):
            return None
        return [MethodSignature.from_wire(entry) for entry in raw]

    def queried(self, name: str) -> bool:
        return any(method_name == name for _, method_name in self.calls)


SAMPLE_METHODS = [
    ("system.listMethods", "This method lists all the methods", [["array"]]),
    ("sample.add", "adds two ints", [["int", "int", "int"]]),
    ("sample.echo", "", "undef"),
]


@pytest.fixture
def sample_client():
    return FakeIntrospectionClient(SAMPLE_METHODS)


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    """Capture loguru records at WARNING and above"""
    messages = []
    logger.remove()
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sample_server():
    """Live XML-RPC server with sample.add (described) and sample.echo (undescribed)"""
    server = SimpleXMLRPCServer(("127.0.0.1", 0), logRequests=False, allow_none=True)
    server.register_introspection_functions()

    def add(a, b):
        """adds two ints"""
        return a + b

    def echo(value):
        return value

    signatures = {"sample.add": [["int", "int", "int"]]}

    def method_signature(name):
        return signatures.get(name, "undef")

    server.register_function(add, "sample.add")
    server.register_function(echo, "sample.echo")
    server.register_function(method_signature, "system.methodSignature")

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}/RPC2"

    server.shutdown()
    server.server_close()
    thread.join()
