"""Tests for the API surface tool."""

from __future__ import annotations

import types

import pytest

import flags_openfeature
from flags_openfeature.tools.api_surface import describe_module, main


def _sample_module() -> types.ModuleType:
    module = types.ModuleType("sample")
    source = '''
import enum

__all__ = ("Color", "Widget", "build", "LIMIT")

LIMIT = 3


class Color(enum.Enum):
    RED = "red"


class Widget:
    size: int = 1

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    def label(self) -> str:
        return self.name

    async def refresh(self) -> None:
        pass

    def _hidden(self) -> None:
        pass


def build(name: str, *, size: int = 1) -> Widget:
    return Widget(name)


def _private_helper() -> None:
    pass
'''
    exec(compile(source, "sample", "exec"), module.__dict__)
    return module


class TestDescribeModule:
    """Tests for describe_module."""

    def test_lists_exported_declarations(self) -> None:
        """Test classes, functions and constants are described."""
        lines = describe_module(_sample_module())

        assert lines == [
            "class Color(Enum)",
            "    RED = 'red'",
            "LIMIT: int = 3",
            "class Widget",
            "    async def refresh(self) -> None",
            "    def __init__(self, name: str) -> None",
            "    label: property",
            "    size: int",
            "def build(name: str, *, size: int = 1) -> sample.Widget",
        ]

    def test_private_names_hidden(self) -> None:
        """Test underscore names are skipped by default."""
        text = "\n".join(describe_module(_sample_module()))

        assert "_hidden" not in text

    def test_private_names_included(self) -> None:
        """Test include_private lists members starting with an underscore."""
        text = "\n".join(describe_module(_sample_module(), include_private=True))

        assert "def _hidden(self) -> None" in text

    def test_module_without_all(self) -> None:
        """Test objects defined in the module are listed when __all__ is absent."""
        module = _sample_module()
        del module.__dict__["__all__"]

        text = "\n".join(describe_module(module))

        assert "def build(name: str, *, size: int = 1) -> sample.Widget" in text
        assert "enum" not in text.split()
        assert "_private_helper" not in text

    def test_unresolvable_annotations_kept_as_text(self) -> None:
        """Test annotations naming undefined types fall back to their source text."""
        module = types.ModuleType("sample")
        exec(compile('def lookup(item: "Missing") -> None:\n    pass\n', "sample", "exec"), module.__dict__)

        assert describe_module(module) == ["def lookup(item: 'Missing') -> None"]

    def test_package_surface(self) -> None:
        """Test the package's own surface includes the provider."""
        lines = describe_module(flags_openfeature)

        assert "class FlagsProvider(AbstractProvider)" in lines
        assert any(line.startswith("def to_flags_value(") for line in lines)


class TestMain:
    """Tests for the command line entry point."""

    def test_prints_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test output goes to stdout by default."""
        assert main(["flags_openfeature.types"]) == 0

        out = capsys.readouterr().out
        assert "class ContextPolicy(str, Enum)" in out
        assert "    COERCING = 'coercing'" in out

    def test_writes_output_file(self, tmp_path) -> None:
        """Test --output writes the surface to a file."""
        target = tmp_path / "surface.txt"

        assert main(["flags_openfeature.flags.values", "--output", str(target)]) == 0

        content = target.read_text(encoding="utf-8")
        assert "def fits_int64(value: int) -> bool" in content
        assert content.endswith("\n")

    def test_unknown_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a module that cannot be imported exits with status 1."""
        assert main(["flags_openfeature.does_not_exist"]) == 1

        assert "cannot import" in capsys.readouterr().err
