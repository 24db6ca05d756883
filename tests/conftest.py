from __future__ import annotations

import json
from typing import Any

import pytest
import requests
from sourcemerge import EtherscanSourceExtractor

ADDRESS = "0xabc0000000000000000000000000000000000001"

B_SOL = """// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

contract B {
    uint256 public value;
}
"""

A_SOL = """// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

import "./B.sol";

contract A is B {
    function set(uint256 v) external {
        value = v;
    }
}
"""


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, reason: str = "OK", text: str | None = None):
        self.payload = payload
        self.status_code = status_code
        self.reason = reason
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} {self.reason}", response=self)

    def json(self) -> Any:
        if self.text is not None:
            return json.loads(self.text)
        return self.payload


class FakeExplorer:
    """Stands in for `requests.get` and records every call."""

    def __init__(self) -> None:
        self.response: Any = FakeResponse({"status": "1", "message": "OK", "result": []})
        self.calls: list[dict[str, Any]] = []

    def __call__(self, url: str, params: dict[str, Any] | None = None, timeout: float | None = None) -> FakeResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def returns_records(self, *records: dict[str, Any]) -> None:
        self.response = FakeResponse({"status": "1", "message": "OK", "result": list(records)})


def make_record(source_code: Any, contract_name: str = "A", compiler_version: str = "v0.8.19+commit.7dd6d404") -> dict[str, Any]:
    return {
        "SourceCode": source_code,
        "ContractName": contract_name,
        "CompilerVersion": compiler_version,
    }


def standard_json(sources: dict[str, str], remappings: list[str] | None = None) -> dict[str, Any]:
    project: dict[str, Any] = {
        "language": "Solidity",
        "sources": {filename: {"content": code} for filename, code in sources.items()},
    }
    if remappings is not None:
        project["settings"] = {"remappings": remappings}
    return project


def double_wrapped(project: dict[str, Any]) -> str:
    return "{" + json.dumps(project) + "}"


@pytest.fixture
def explorer(monkeypatch: pytest.MonkeyPatch) -> FakeExplorer:
    fake = FakeExplorer()
    monkeypatch.setattr(requests, "get", fake)
    return fake


@pytest.fixture
def extractor() -> EtherscanSourceExtractor:
    return EtherscanSourceExtractor(etherscan_api_key="test-key")
