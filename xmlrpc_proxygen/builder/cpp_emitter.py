"""
xmlrpc-proxygen - C++ Code Emitters
Render a ProxyClassModel as an xmlrpc-c header and implementation

Both renderers are pure: they read the model and return text. Writing the
text anywhere is the caller's business.
"""

import re
from typing import List

from ..core.exceptions import GenerationError, RemoteFaultError
from ..core.schema import MethodDescriptor, MethodSignature, ProxyClassModel
from ..version import TOOL_NAME
from .cpp_types import cpp_type

_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
_TRAILING_SPLICE = re.compile(r'[\s\\]+$')

HEADER_INCLUDES = [
    "#include <ctime>",
    "#include <map>",
    "#include <string>",
    "#include <vector>",
    "#include <xmlrpc-c/client_simple.hpp>",
]

INDENT = "    "

CPP_KEYWORDS = frozenset("""
    alignas alignof and and_eq asm auto bitand bitor bool break case catch
    char char8_t char16_t char32_t class compl concept const consteval
    constexpr constinit const_cast continue co_await co_return co_yield
    decltype default delete do double dynamic_cast else enum explicit export
    extern false float for friend goto if inline int long mutable namespace
    new noexcept not not_eq nullptr operator or or_eq private protected
    public register reinterpret_cast requires return short signed sizeof
    static static_assert static_cast struct switch template this
    thread_local throw true try typedef typeid typename union unsigned using
    virtual void volatile wchar_t while xor xor_eq
""".split())


# ============================================================================
# PER-METHOD FORMATTING
# ============================================================================

def _parameter_names(signature: MethodSignature) -> List[str]:
    return [f"arg{i}" for i in range(1, len(signature.parameter_types) + 1)]


def _parameter_list(signature: MethodSignature) -> str:
    names = _parameter_names(signature)
    return ", ".join(
        cpp_type(tag).parameter(name)
        for tag, name in zip(signature.parameter_types, names)
    )


def _check_local_name(method: MethodDescriptor) -> None:
    if not _IDENTIFIER.match(method.local_name):
        raise ValueError(
            f"Method {method.remote_name} has no valid C++ name "
            f"('{method.local_name}' is not an identifier)"
        )
    if method.local_name in CPP_KEYWORDS:
        raise ValueError(
            f"Method {method.remote_name} has no valid C++ name "
            f"('{method.local_name}' is a reserved word)"
        )


def _help_comment(help_text: str, indent: str) -> List[str]:
    # A trailing backslash would splice the next source line into the comment
    lines = help_text.strip().splitlines()
    return [_TRAILING_SPLICE.sub("", f"{indent}// {line}") for line in lines]


def format_method_declaration(method: MethodDescriptor) -> List[str]:
    """
    Format the member declarations of one method, one line per signature

    Args:
        method: Method to declare

    Returns:
        Lines (indented for the class body), help text first as a comment

    Raises:
        ValueError: If the method name cannot be a C++ identifier
    """
    _check_local_name(method)
    lines = _help_comment(method.help_text, INDENT)
    for signature in method.signatures:
        return_type = cpp_type(signature.return_type).native
        lines.append(
            f"{INDENT}{return_type} {method.local_name}({_parameter_list(signature)});"
        )
    return lines


def format_method_definition(class_name: str, method: MethodDescriptor) -> List[str]:
    """
    Format one function body per signature of a method

    Each body marshals its arguments into xmlrpc_c values, calls the remote
    method through the class's clientSimple, and converts the result back.
    """
    _check_local_name(method)
    lines = []
    for signature in method.signatures:
        return_type = cpp_type(signature.return_type)
        lines.append("")
        lines.append(return_type.native)
        lines.append(
            f"{class_name}::{method.local_name}({_parameter_list(signature)}) {{"
        )
        lines.append("")
        lines.append(f"{INDENT}xmlrpc_c::paramList params;")
        for tag, name in zip(signature.parameter_types, _parameter_names(signature)):
            lines.append(f"{INDENT}params.add({cpp_type(tag).to_wire(name)});")
        lines.append("")
        lines.append(f"{INDENT}xmlrpc_c::value result;")
        lines.append(
            f'{INDENT}this->client.call(this->serverUrl, "{method.remote_name}", '
            f'params, &result);'
        )
        lines.append("")
        lines.append(f"{INDENT}return {return_type.from_wire('result')};")
        lines.append("}")
    return lines


# ============================================================================
# FILE-LEVEL RENDERING
# ============================================================================

def _reason(error: Exception) -> str:
    if isinstance(error, RemoteFaultError):
        return error.description
    return str(error)


def render_declaration(model: ProxyClassModel) -> str:
    """
    Render the complete header for the proxy class

    Args:
        model: Class to render

    Returns:
        Header text, include guard wrapping everything after the banner

    Raises:
        GenerationError: If any method cannot be formatted
    """
    class_name = model.class_name
    guard = model.include_guard

    try:
        lines = [
            f"// Interface definition for {class_name} class, "
            f"an XML-RPC FOR C/C++ proxy class",
            f"// Generated by '{TOOL_NAME}'",
            "",
            f"#ifndef {guard}",
            f"#define {guard} 1",
            "",
            *HEADER_INCLUDES,
            "",
            f"class {class_name} {{",
            "public:",
            f"{INDENT}{class_name}(std::string const& serverUrl)",
            f"{INDENT}{INDENT}: serverUrl(serverUrl) {{}}",
        ]

        for method in model.methods:
            lines.append("")
            lines.extend(format_method_declaration(method))

        lines.extend([
            "",
            "private:",
            f"{INDENT}xmlrpc_c::clientSimple client;",
            f"{INDENT}std::string const serverUrl;",
            "};",
            "",
            f"#endif /* {guard} */",
        ])
    except Exception as e:
        raise GenerationError(class_name, "header", _reason(e))

    return "\n".join(lines) + "\n"


def render_definition(model: ProxyClassModel) -> str:
    """
    Render the complete implementation for the proxy class

    The generated file includes the header under the name the caller is
    expected to save it as (model.header_filename).

    Raises:
        GenerationError: If any method cannot be formatted
    """
    class_name = model.class_name

    try:
        lines = [
            f"// {class_name} - an XML-RPC FOR C/C++ proxy class",
            f"// Generated by '{TOOL_NAME}'",
            "",
            f'#include "{model.header_filename}"',
        ]

        for method in model.methods:
            lines.extend(format_method_definition(class_name, method))
    except Exception as e:
        raise GenerationError(class_name, "definition", _reason(e))

    return "\n".join(lines) + "\n"
