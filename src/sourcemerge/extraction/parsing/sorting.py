"""Dependency ordering of declarations across source files."""

from typing import Dict, List, Optional, Set

from ...models import SolidityDeclaration


def topological_sort_declarations(declarations: List[SolidityDeclaration]) -> List[SolidityDeclaration]:
    """
    Order declarations so that dependencies come before their dependents.

    Ties keep the input order. When a name is declared more than once, the
    declaration in the dependent's own file wins, then one in a file the
    dependent imports, then the first declaration. Cycles are broken at the
    first declaration revisited.
    """
    by_name: Dict[str, List[int]] = {}
    for index, declaration in enumerate(declarations):
        by_name.setdefault(declaration.name, []).append(index)

    def resolve(dependent: SolidityDeclaration, name: str) -> Optional[int]:
        candidates = by_name.get(name)
        if not candidates:
            return None
        for preferred_paths in ([dependent.relative_path], dependent.imports):
            for candidate in candidates:
                if declarations[candidate].relative_path in preferred_paths:
                    return candidate
        return candidates[0]

    ordered: List[SolidityDeclaration] = []
    done: Set[int] = set()
    visiting: Set[int] = set()

    def visit(index: int) -> None:
        if index in done or index in visiting:
            return
        visiting.add(index)
        declaration = declarations[index]
        for dependency in declaration.dependencies:
            dependency_index = resolve(declaration, dependency)
            if dependency_index is not None:
                visit(dependency_index)
        visiting.discard(index)
        done.add(index)
        ordered.append(declaration)

    for index in range(len(declarations)):
        visit(index)

    return ordered
