import pytest
from pydantic import ValidationError

from xmlrpc_proxygen.core.exceptions import SignatureFormatError
from xmlrpc_proxygen.core.schema import (
    CommandLineArgs,
    MethodDescriptor,
    MethodSignature,
    ProxyClassModel,
    TypeTag,
)


class TestTypeTag:
    @pytest.mark.parametrize("name", [tag.value for tag in TypeTag])
    def test_wire_names(self, name):
        assert TypeTag.from_wire(name).value == name

    def test_i4_alias(self):
        assert TypeTag.from_wire("i4") is TypeTag.INT

    def test_unknown_type(self):
        with pytest.raises(SignatureFormatError, match="nil"):
            TypeTag.from_wire("nil")


class TestMethodSignature:
    def test_from_wire(self):
        signature = MethodSignature.from_wire(["int", "int", "int"])
        assert signature.return_type is TypeTag.INT
        assert signature.parameter_types == (TypeTag.INT, TypeTag.INT)

    def test_return_only(self):
        signature = MethodSignature.from_wire(["array"])
        assert signature.return_type is TypeTag.ARRAY
        assert signature.parameter_types == ()

    @pytest.mark.parametrize("raw", [[], "int", ["int", 3], None])
    def test_malformed(self, raw):
        with pytest.raises(SignatureFormatError):
            MethodSignature.from_wire(raw)


class TestMethodDescriptor:
    def test_requires_a_signature(self):
        with pytest.raises(ValidationError):
            MethodDescriptor(local_name="add", remote_name="sample.add", signatures=())

    def test_help_defaults_to_empty(self):
        method = MethodDescriptor(
            local_name="add",
            remote_name="sample.add",
            signatures=(MethodSignature.from_wire(["int"]),),
        )
        assert method.help_text == ""


class TestCommandLineArgs:
    def test_values_kept(self):
        args = CommandLineArgs(
            server_url="http://localhost/RPC2", method_prefix="system", class_name="systemProxy"
        )
        assert args.server_url == "http://localhost/RPC2"
        assert args.method_prefix == "system"
        assert args.class_name == "systemProxy"

    def test_null_prefix(self):
        args = CommandLineArgs(server_url="u", method_prefix="null", class_name="P")
        assert args.method_prefix == ""

    def test_invalid_class_name(self):
        with pytest.raises(ValidationError):
            CommandLineArgs(server_url="u", method_prefix="", class_name="my-proxy")

    def test_frozen(self):
        args = CommandLineArgs(server_url="u", method_prefix="", class_name="P")
        with pytest.raises(ValidationError):
            args.class_name = "Q"


class TestProxyClassModel:
    def test_file_naming(self):
        model = ProxyClassModel(class_name="SampleProxy")
        assert model.header_filename == "SampleProxy.h"
        assert model.include_guard == "SAMPLEPROXY_H"

    def test_add_method_keeps_order(self):
        model = ProxyClassModel(class_name="P")
        signature = MethodSignature.from_wire(["int"])
        for name in ["b", "a", "c"]:
            model.add_method(
                MethodDescriptor(local_name=name, remote_name=f"x.{name}", signatures=(signature,))
            )
        assert model.get_method_names() == ["b", "a", "c"]
