import pytest

from promdedup.metrics import Canonicalizer, MetricLabelName, MetricName, parse_symbol
from promdedup.utils.exceptions import LabelShapeError


def test_parse_symbol_by_member_name_and_member():
    assert parse_symbol(MetricName, "rpc_requests_total") == 2
    assert parse_symbol(MetricName, MetricName.rpc_requests_total) == 2
    assert parse_symbol(MetricLabelName, "method") == 1


def test_parse_symbol_rejects_unknown_and_numeric_strings():
    assert parse_symbol(MetricName, "requests_total") is None
    # Numeric strings are not member names; parsing is by name only
    assert parse_symbol(MetricName, "2") is None
    assert parse_symbol(MetricName, 2) is None
    assert parse_symbol(None, "rpc_requests_total") is None


def test_known_name_canonicalizes_to_enum_value():
    canon = Canonicalizer()
    assert canon.name("rpc_requests_total") == "2"
    assert canon.name(MetricName.rpc_requests_total) == "2"
    assert canon.name("2") == "2"


def test_unknown_name_is_verbatim():
    canon = Canonicalizer()
    assert canon.name("requests_total") == "requests_total"
    assert canon.name("Requests_Total") == "Requests_Total"


def test_labels_sorted_and_order_independent():
    canon = Canonicalizer()
    a = canon.labels({"zone": "eu", "method": "GET", "status": "200"})
    b = canon.labels({"status": "200", "zone": "eu", "method": "GET"})
    assert a == b
    assert a == (("1", "GET"), ("2", "200"), ("zone", "eu"))


def test_symbolic_and_numeric_label_names_match():
    canon = Canonicalizer()
    assert canon.labels({"method": "GET"}) == canon.labels({"1": "GET"})
    assert canon.labels({MetricLabelName.method: "GET"}) == canon.labels({"1": "GET"})


def test_label_values_are_not_canonicalized():
    canon = Canonicalizer()
    # "method" as a value stays a value
    assert canon.labels({"component": "method"}) == (("5", "method"),)


def test_label_values_coerced_to_str():
    canon = Canonicalizer()
    assert canon.labels({"status": 200}) == canon.labels({"status": "200"})


def test_colliding_label_names_raise():
    canon = Canonicalizer()
    with pytest.raises(LabelShapeError) as ei:
        canon.labels({"method": "GET", "1": "POST"})
    assert "canonicalize" in str(ei.value)
    assert isinstance(ei.value, ValueError)


def test_empty_labels():
    canon = Canonicalizer()
    assert canon.labels({}) == ()
    assert canon.labels(None) == ()


def test_identity_canonicalizer():
    canon = Canonicalizer.identity()
    assert canon.name("rpc_requests_total") == "rpc_requests_total"
    assert canon.labels({"method": "GET", "1": "POST"}) == (("1", "POST"), ("method", "GET"))


def test_custom_enumerations():
    from enum import IntEnum

    class Names(IntEnum):
        jobs_total = 40

    class Labels(IntEnum):
        queue = 7

    canon = Canonicalizer(Names, Labels)
    assert canon.name("jobs_total") == "40"
    assert canon.name("rpc_requests_total") == "rpc_requests_total"
    assert canon.labels({"queue": "default"}) == (("7", "default"),)
