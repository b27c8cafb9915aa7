"""
Core Schema Definitions
Pydantic models for the command line, remote signatures and the proxy class

The ProxyClassModel is the contract between the collector and the emitters:
- The collector builds it once from the server's introspection answers
- Both emitters read it, never mutate it
"""
import re
from enum import Enum
from typing import List, Tuple, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import SignatureFormatError


_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')

# Literal the usage message advertises for "methods without a prefix"
NULL_PREFIX = "null"


class TypeTag(str, Enum):
    """XML-RPC value types, valued by their wire names"""
    BOOLEAN = "boolean"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    BYTES = "base64"
    DATETIME = "dateTime.iso8601"
    STRUCT = "struct"
    ARRAY = "array"

    @classmethod
    def from_wire(cls, name: str) -> 'TypeTag':
        """
        Map a type name found in a methodSignature answer to a TypeTag

        Args:
            name: Wire type name (e.g., 'int', 'i4', 'dateTime.iso8601')

        Returns:
            Matching TypeTag

        Raises:
            SignatureFormatError: If the name is not an XML-RPC type
        """
        if name == "i4":
            return cls.INT
        try:
            return cls(name)
        except ValueError:
            raise SignatureFormatError(
                f"Unknown XML-RPC type '{name}'",
                {"type": name}
            )


class CommandLineArgs(BaseModel):
    """The three positional arguments of a run"""
    model_config = ConfigDict(frozen=True)

    server_url: str = Field(
        ...,
        description="URL of the XML-RPC server (e.g., 'http://localhost/RPC2')"
    )

    method_prefix: str = Field(
        ...,
        description="Prefix of the methods to include; empty for unprefixed methods"
    )

    class_name: str = Field(
        ...,
        description="Name to give the generated proxy class"
    )

    @field_validator('method_prefix')
    @classmethod
    def normalize_prefix(cls, v):
        """'null' stands for the empty prefix"""
        return "" if v == NULL_PREFIX else v

    @field_validator('class_name')
    @classmethod
    def validate_class_name(cls, v):
        """Ensure the class name is usable as a C++ identifier"""
        if not _IDENTIFIER.match(v):
            raise ValueError(f"Invalid class name: {v!r}. Expected a C++ identifier")
        return v


class MethodSignature(BaseModel):
    """One overload of a remote method: return type plus ordered parameter types"""
    model_config = ConfigDict(frozen=True)

    return_type: TypeTag
    parameter_types: Tuple[TypeTag, ...] = ()

    @classmethod
    def from_wire(cls, raw: Sequence) -> 'MethodSignature':
        """
        Build a signature from one entry of a methodSignature answer

        Args:
            raw: Array of type names, return type first (e.g., ['int', 'int', 'int'])

        Returns:
            MethodSignature instance

        Raises:
            SignatureFormatError: If the entry is empty or holds non-string items
        """
        if isinstance(raw, str) or not isinstance(raw, (list, tuple)) or not raw:
            raise SignatureFormatError(
                f"Malformed signature: {raw!r}",
                {"signature": raw}
            )
        for item in raw:
            if not isinstance(item, str):
                raise SignatureFormatError(
                    f"Malformed signature: {raw!r}",
                    {"signature": raw}
                )

        tags = [TypeTag.from_wire(item) for item in raw]
        return cls(return_type=tags[0], parameter_types=tuple(tags[1:]))


class MethodDescriptor(BaseModel):
    """A remote method as it will appear in the proxy class"""
    model_config = ConfigDict(frozen=True)

    local_name: str = Field(
        ...,
        description="Member function name (part after the last dot)"
    )

    remote_name: str = Field(
        ...,
        description="Full method name on the server (e.g., 'sample.add')"
    )

    help_text: str = Field(
        "",
        description="Server-provided documentation, empty if none"
    )

    signatures: Tuple[MethodSignature, ...] = Field(
        ...,
        description="Overloads reported by system.methodSignature"
    )

    @field_validator('signatures')
    @classmethod
    def validate_signatures(cls, v):
        """A method needs at least one signature to be rendered"""
        if not v:
            raise ValueError("Method must carry at least one signature")
        return v


class ProxyClassModel(BaseModel):
    """
    In-memory description of the proxy class to generate

    Methods keep the order in which the server listed them.
    """

    class_name: str
    methods: List[MethodDescriptor] = Field(default_factory=list)

    def add_method(self, method: MethodDescriptor) -> None:
        self.methods.append(method)

    @property
    def header_filename(self) -> str:
        return f"{self.class_name}.h"

    @property
    def include_guard(self) -> str:
        """Guard token derived from the header filename (SampleProxy.h -> SAMPLEPROXY_H)"""
        return re.sub(r'[^A-Za-z0-9]', '_', self.header_filename).upper()

    def get_method_names(self) -> List[str]:
        """Return the local names of all methods, in order"""
        return [method.local_name for method in self.methods]

    def render_declaration(self) -> str:
        from ..builder.cpp_emitter import render_declaration
        return render_declaration(self)

    def render_definition(self) -> str:
        from ..builder.cpp_emitter import render_definition
        return render_definition(self)


__all__ = [
    'TypeTag',
    'CommandLineArgs',
    'MethodSignature',
    'MethodDescriptor',
    'ProxyClassModel',
    'NULL_PREFIX',
]
