from __future__ import annotations

import json

import pytest
import requests
from conftest import ADDRESS, A_SOL, B_SOL, FakeResponse, double_wrapped, make_record, standard_json
from sourcemerge import (
    ConfigurationError,
    EtherscanSourceExtractor,
    InvalidAddressError,
    MalformedSourceCodeError,
    NoHttpResponseError,
    SourceFileNotFoundError,
    TransportError,
    UnexpectedResponseShapeError,
    UnverifiedContractError,
)


def test_constructor_requires_api_key_without_url() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        EtherscanSourceExtractor()

    assert exc_info.value.config_key == "ETHERSCAN_API_KEY"


def test_constructor_accepts_explicit_url_without_key() -> None:
    extractor = EtherscanSourceExtractor(url="https://explorer.example/api")

    assert extractor.url == "https://explorer.example/api"


def test_constructor_rejects_non_positive_timeout() -> None:
    with pytest.raises(ConfigurationError):
        EtherscanSourceExtractor(etherscan_api_key="key", timeout=0)


def test_url_uses_network_chain_id() -> None:
    extractor = EtherscanSourceExtractor(etherscan_api_key="key", network="arbitrum")

    assert extractor.url == "https://api.etherscan.io/v2/api?chainid=42161"


def test_request_parameters(explorer, extractor) -> None:
    explorer.returns_records(make_record(B_SOL))

    extractor.get_source_code(ADDRESS)

    assert len(explorer.calls) == 1
    call = explorer.calls[0]
    assert call["url"] == "https://api.etherscan.io/v2/api?chainid=1"
    assert call["params"] == {
        "module": "contract",
        "action": "getsourcecode",
        "address": ADDRESS,
        "apikey": "test-key",
    }
    assert call["timeout"] == 30


def test_fetch_result_carries_metadata_from_first_record(explorer, extractor) -> None:
    explorer.returns_records(
        make_record(double_wrapped(standard_json({"A.sol": A_SOL}, ["a/=b/"])), "First", "v0.8.19+commit.7dd6d404"),
        make_record(json.dumps(standard_json({"B.sol": B_SOL})), "Second", "v0.7.6+commit.7338295f"),
    )

    fetched = extractor.get_source_code(ADDRESS)

    assert fetched.filenames == ["A.sol", "B.sol"]
    assert fetched.contract_name == "First"
    assert fetched.compiler_version == "v0.8.19+commit.7dd6d404"
    assert fetched.metadata.contract_name == "First"
    assert [r.to for r in fetched.remappings] == ["b/"]


def test_single_file_result_has_empty_remappings(explorer, extractor) -> None:
    explorer.returns_records(make_record(B_SOL))

    fetched = extractor.get_source_code(ADDRESS)

    assert fetched.filenames == [ADDRESS]
    assert fetched.remappings == []


def test_duplicate_filenames_keep_first(explorer, extractor) -> None:
    explorer.returns_records(
        make_record(json.dumps(standard_json({"A.sol": A_SOL}))),
        make_record(json.dumps(standard_json({"A.sol": "contract Other {}"}))),
    )

    fetched = extractor.get_source_code(ADDRESS)

    assert fetched.filenames == ["A.sol"]
    assert fetched.files[0].code == A_SOL


def test_filename_filter_matches_base_name(explorer, extractor) -> None:
    explorer.returns_records(make_record(json.dumps(standard_json({"src/Foo.sol": "contract Foo {}", "Bar.sol": "contract Bar {}"}))))

    fetched = extractor.get_source_code(ADDRESS, "Foo")

    assert fetched.filenames == ["src/Foo.sol"]


def test_filename_filter_is_case_sensitive(explorer, extractor) -> None:
    explorer.returns_records(make_record(json.dumps(standard_json({"Foo.sol": "contract Foo {}"}))))

    with pytest.raises(SourceFileNotFoundError):
        extractor.get_source_code(ADDRESS, "foo")


def test_missing_filename_fails(explorer, extractor) -> None:
    explorer.returns_records(make_record(json.dumps(standard_json({"Foo.sol": "contract Foo {}", "Bar.sol": "contract Bar {}"}))))

    with pytest.raises(SourceFileNotFoundError) as exc_info:
        extractor.get_source_code(ADDRESS, "Baz")

    assert exc_info.value.filename == "Baz"
    assert ADDRESS in str(exc_info.value)


def test_invalid_address_is_rejected_before_request(explorer, extractor) -> None:
    with pytest.raises(InvalidAddressError):
        extractor.get_source_code("0x1234")

    assert explorer.calls == []


def test_no_http_response(explorer, extractor) -> None:
    explorer.response = requests.ConnectionError("connection refused")

    with pytest.raises(NoHttpResponseError) as exc_info:
        extractor.get_source_code(ADDRESS)

    assert "No HTTP response" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_timeout_is_no_http_response(explorer, extractor) -> None:
    explorer.response = requests.Timeout("timed out")

    with pytest.raises(NoHttpResponseError):
        extractor.get_source_code(ADDRESS)


def test_http_error_status_is_transport_error(explorer, extractor) -> None:
    explorer.response = FakeResponse(status_code=503, reason="Service Unavailable")

    with pytest.raises(TransportError) as exc_info:
        extractor.get_source_code(ADDRESS)

    assert exc_info.value.status_code == 503
    assert exc_info.value.status_text == "Service Unavailable"
    assert "HTTP status code 503" in str(exc_info.value)


def test_non_json_body_is_transport_error(explorer, extractor) -> None:
    explorer.response = FakeResponse(text="<html>rate limited</html>")

    with pytest.raises(TransportError) as exc_info:
        extractor.get_source_code(ADDRESS)

    assert exc_info.value.status_code == 200


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "0", "message": "NOTOK", "result": "Invalid API Key"},
        {"status": "1", "message": "OK", "result": []},
        {"status": "1", "message": "OK"},
        ["not", "an", "object"],
    ],
)
def test_result_that_is_not_a_list_fails(explorer, extractor, payload) -> None:
    explorer.response = FakeResponse(payload)

    with pytest.raises(UnexpectedResponseShapeError) as exc_info:
        extractor.get_source_code(ADDRESS)

    assert exc_info.value.payload == payload


def test_failure_in_any_record_aborts_fetch(explorer, extractor) -> None:
    explorer.returns_records(make_record(B_SOL), make_record(""))

    with pytest.raises(UnverifiedContractError):
        extractor.get_source_code(ADDRESS)


def test_malformed_record_aborts_fetch(explorer, extractor) -> None:
    explorer.returns_records(make_record("{{not json}}"))

    with pytest.raises(MalformedSourceCodeError):
        extractor.get_source_code(ADDRESS)
