"""Structured models passed between the fetch, parse and merge stages."""

from re import Pattern
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

DeclarationKind = Literal["contract", "abstract", "interface", "library", "struct", "enum"]


class SourceFile(BaseModel):
    model_config = ConfigDict(frozen=True)
    filename: str
    code: str


class Remapping(BaseModel):
    """
    Import path rewrite rule from the explorer's compiler settings.

    `from_` is anchored to the start of a path and is built from the raw
    prefix without escaping.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    from_: Pattern[str] = Field(alias="from")
    to: str


class ContractMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)
    contract_name: str = ""
    compiler_version: str = ""


class FetchResult(BaseModel):
    files: List[SourceFile]
    contract_name: str = ""
    compiler_version: str = ""
    remappings: List[Remapping] = Field(default_factory=list)
    contract_address: str = ""

    @property
    def metadata(self) -> ContractMetadata:
        return ContractMetadata(contract_name=self.contract_name, compiler_version=self.compiler_version)

    @property
    def filenames(self) -> List[str]:
        return [f.filename for f in self.files]


class MergeResult(BaseModel):
    solidity_code: str
    contract_name: str = ""


class ParsedDeclaration(BaseModel):
    """Top-level declaration as found in the source text."""
    name: str
    kind: DeclarationKind
    base_contracts: List[str] = Field(default_factory=list)
    body: str = ""


class ParsedSourceUnit(BaseModel):
    imports: List[str] = Field(default_factory=list)
    declarations: List[ParsedDeclaration] = Field(default_factory=list)


class SolidityDeclaration(BaseModel):
    name: str
    kind: DeclarationKind
    relative_path: str
    base_contracts: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)
    imports: List[str] = Field(default_factory=list)

    @property
    def dependencies(self) -> List[str]:
        """Names this declaration needs declared first, bases before other references."""
        deps = list(self.base_contracts)
        deps.extend(r for r in self.references if r not in deps)
        return [d for d in deps if d != self.name]
