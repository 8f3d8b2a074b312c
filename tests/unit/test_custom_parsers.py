from dataclasses import dataclass
from decimal import Decimal
from ipaddress import IPv4Address

import pytest

from envbind import BindingErrors, ConversionError, CustomParsers, ErrorCode, UnsupportedTypeError, bind, env


@dataclass
class Network:
    gateway: IPv4Address = env("GATEWAY", value=IPv4Address("0.0.0.0"))


def test_register_and_parse():
    parsers = CustomParsers()
    parsers.register(IPv4Address, IPv4Address)

    assert IPv4Address in parsers and len(parsers) == 1
    assert parsers.get(IPv4Address) is IPv4Address
    assert parsers.get(Decimal) is None
    assert parsers.parse(IPv4Address, "10.0.0.1") == IPv4Address("10.0.0.1")


def test_parse_without_registration_is_unsupported():
    with pytest.raises(UnsupportedTypeError):
        CustomParsers().parse(Decimal, "1.5")


def test_failing_parser_is_wrapped():
    parsers = CustomParsers({IPv4Address: IPv4Address})
    with pytest.raises(ConversionError) as e:
        parsers.parse(IPv4Address, "not-an-ip")
    assert str(e.value).startswith("Custom parser error: ")
    assert e.value.code is ErrorCode.CONVERSION_FAILURE


def test_registry_does_not_change_default_binding(make_env):
    CustomParsers({IPv4Address: IPv4Address})
    with pytest.raises(BindingErrors) as e:
        bind(Network(), environment=make_env(GATEWAY="10.0.0.1"))
    assert e.value.codes() == [ErrorCode.UNSUPPORTED_TYPE]
