# ============================================================================
# C++ TYPE MAPPING
# ============================================================================
# Native C++ type and xmlrpc-c wire value class for every XML-RPC type.
# The table is total over TypeTag; a missing entry is a programming error.
#
# ============================================================================

from typing import Dict, NamedTuple

from ..core.schema import TypeTag


class CppType(NamedTuple):
    """How one XML-RPC type is spelled on the C++ side."""
    native: str         # type used in the proxy's member function signatures
    wire: str           # xmlrpc_c value class used to marshal it
    unwrap: str         # expression template turning a wire value back to native

    def parameter(self, name: str) -> str:
        """Declare an input parameter; class types go by const reference."""
        if self.is_simple:
            return f"{self.native} const {name}"
        return f"{self.native} const& {name}"

    def to_wire(self, name: str) -> str:
        return f"{self.wire}({name})"

    def from_wire(self, value: str) -> str:
        return self.unwrap.format(wire=self.wire, value=value)

    @property
    def is_simple(self) -> bool:
        return self.native in _SIMPLE_NATIVES


_SIMPLE_NATIVES = {"bool", "int", "double", "time_t"}

_TYPE_MAP: Dict[TypeTag, CppType] = {
    TypeTag.BOOLEAN: CppType(
        "bool", "xmlrpc_c::value_boolean", "static_cast<bool>({wire}({value}))"),
    TypeTag.INT: CppType(
        "int", "xmlrpc_c::value_int", "static_cast<int>({wire}({value}))"),
    TypeTag.DOUBLE: CppType(
        "double", "xmlrpc_c::value_double", "static_cast<double>({wire}({value}))"),
    TypeTag.STRING: CppType(
        "std::string", "xmlrpc_c::value_string", "static_cast<std::string>({wire}({value}))"),
    TypeTag.BYTES: CppType(
        "std::vector<unsigned char>", "xmlrpc_c::value_bytestring",
        "{wire}({value}).vectorUcharValue()"),
    TypeTag.DATETIME: CppType(
        "time_t", "xmlrpc_c::value_datetime", "static_cast<time_t>({wire}({value}))"),
    TypeTag.STRUCT: CppType(
        "std::map<std::string, xmlrpc_c::value>", "xmlrpc_c::value_struct",
        "static_cast<std::map<std::string, xmlrpc_c::value> >({wire}({value}))"),
    TypeTag.ARRAY: CppType(
        "std::vector<xmlrpc_c::value>", "xmlrpc_c::value_array",
        "{wire}({value}).vectorValueValue()"),
}


def cpp_type(tag: TypeTag) -> CppType:
    """
    Look up the C++ spelling of an XML-RPC type

    Raises:
        KeyError: If the tag has no entry (never happens for a TypeTag)
    """
    return _TYPE_MAP[tag]
