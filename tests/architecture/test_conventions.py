"""
Convention Enforcement Tests.

Permanent tests that catch anti-patterns which import-based layer rules
cannot detect: frozen dataclass conventions, immutable collections,
silent exception swallowing, and interface contracts.
"""

import ast
import inspect
from pathlib import Path

SRC_ROOT = Path(__file__).parent.parent.parent / "src" / "agentline"

# Ports may offer non-abstract helpers with a sensible default
CONCRETE_PORT_METHODS = {"InvokerInterface.describe"}


def dataclass_info(filepath: Path) -> list[tuple[str, bool]]:
    """Parse a file and return (class_name, is_frozen) for each @dataclass."""
    tree = ast.parse(filepath.read_text())
    results = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
                results.append((node.name, False))
            elif (
                isinstance(decorator, ast.Call)
                and isinstance(decorator.func, ast.Name)
                and decorator.func.id == "dataclass"
            ):
                frozen = any(
                    kw.arg == "frozen"
                    and isinstance(kw.value, ast.Constant)
                    and kw.value.value is True
                    for kw in decorator.keywords
                )
                results.append((node.name, frozen))
    return results


class TestFrozenDataclassConvention:
    """Domain and settings dataclasses must be frozen."""

    def test_domain_models_are_frozen(self):
        violations = [
            name
            for py_file in sorted((SRC_ROOT / "domain").glob("*.py"))
            for name, frozen in dataclass_info(py_file)
            if not frozen
        ]

        assert not violations, f"Domain dataclasses must be frozen. Violations: {violations}"

    def test_settings_are_frozen(self):
        assert dataclass_info(SRC_ROOT / "config.py") == [("Settings", True)]


class TestImmutableCollections:
    """Frozen domain model fields should use tuple, not list."""

    def test_domain_models_use_tuples_not_lists(self):
        models_file = SRC_ROOT / "domain" / "models.py"
        source = models_file.read_text()
        tree = ast.parse(source)
        violations = []

        for node in ast.walk(tree):
            if not isinstance(node, ast.ClassDef):
                continue
            for item in node.body:
                if isinstance(item, ast.AnnAssign):
                    annotation = ast.get_source_segment(source, item.annotation) or ""
                    if "list[" in annotation.lower():
                        target = getattr(item.target, "id", "?")
                        violations.append(f"{node.name}.{target}")

        assert not violations, (
            "Frozen dataclass fields should use tuple, not list:\n"
            + "\n".join(f"  - {v}" for v in violations)
        )


class TestNoSilentExceptionSwallowing:
    """No bare 'except:' and no 'except ...: pass' in src/."""

    def test_no_bare_except_or_pass(self):
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            source = py_file.read_text()
            for node in ast.walk(ast.parse(source)):
                if not isinstance(node, ast.ExceptHandler):
                    continue
                rel_path = py_file.relative_to(SRC_ROOT.parent.parent)
                if node.type is None:
                    violations.append(f"{rel_path}:{node.lineno}: bare except")
                    continue
                if len(node.body) == 1:
                    stmt = node.body[0]
                    is_ellipsis = (
                        isinstance(stmt, ast.Expr)
                        and isinstance(stmt.value, ast.Constant)
                        and stmt.value.value is ...
                    )
                    if isinstance(stmt, ast.Pass) or is_ellipsis:
                        handler = ast.get_source_segment(source, node.type) or ""
                        violations.append(f"{rel_path}:{node.lineno}: except {handler}: pass")

        assert not violations, "Silent exception swallowing found:\n" + "\n".join(
            f"  - {v}" for v in violations
        )


class TestInterfaceConventions:
    """Interface naming and contract conventions."""

    def test_all_ports_end_with_interface(self):
        """All ABCs in domain/interfaces.py must end with 'Interface'."""
        from agentline.domain import interfaces

        abstract_classes = [
            name
            for name, obj in inspect.getmembers(interfaces, inspect.isclass)
            if inspect.isabstract(obj) and not name.startswith("_")
        ]

        violations = [name for name in abstract_classes if not name.endswith("Interface")]

        assert not violations, f"Abstract classes should end with 'Interface': {violations}"

    def test_interface_methods_are_abstract(self):
        """Every public port method is abstract unless explicitly allowed."""
        from agentline.domain import interfaces

        violations = []
        for name, cls in inspect.getmembers(interfaces, inspect.isclass):
            if not inspect.isabstract(cls) or not name.endswith("Interface"):
                continue
            for method_name, method in inspect.getmembers(cls, predicate=inspect.isfunction):
                if method_name.startswith("_"):
                    continue
                qualified = f"{name}.{method_name}"
                if qualified in CONCRETE_PORT_METHODS:
                    continue
                if not getattr(method, "__isabstractmethod__", False):
                    violations.append(qualified)

        assert not violations, f"Public interface methods must be abstract: {violations}"

    def test_implementations_satisfy_interfaces(self):
        """Every adapter can be instantiated, so no abstract method is left open."""
        from agentline.domain.interfaces import (
            ArtifactStoreInterface,
            InvokerInterface,
            PersonaLoaderInterface,
        )
        from agentline.infrastructure import (
            ClaudeCliInvoker,
            FilesystemArtifactStore,
            FilesystemPersonaLoader,
            MockInvoker,
        )

        pairs = [
            (ArtifactStoreInterface, FilesystemArtifactStore),
            (InvokerInterface, ClaudeCliInvoker),
            (InvokerInterface, MockInvoker),
            (PersonaLoaderInterface, FilesystemPersonaLoader),
        ]
        for port, impl_cls in pairs:
            assert issubclass(impl_cls, port)
            assert not inspect.isabstract(impl_cls), f"{impl_cls.__name__} is abstract"
