"""Print the public API surface of a Python module.

The output lists one declaration per line (classes with their bases,
functions with signatures, class members indented below their class and
module constants), sorted so two versions can be compared with ``diff``::

    flags-openfeature-api-surface flags_openfeature --output api-surface.txt
    git diff --exit-code api-surface.txt

Names come from the module's ``__all__`` when it defines one; otherwise every
public object defined in the module itself is listed.
"""

from __future__ import annotations

import argparse
import enum
import importlib
import inspect
import sys
from collections.abc import Sequence
from types import ModuleType
from typing import Any

__all__ = (
    "describe_module",
    "main",
)

_INDENT = "    "


def _is_public(name: str, include_private: bool) -> bool:
    return include_private or not name.startswith("_") or name == "__init__"


def _signature(obj: Any) -> str:
    try:
        return str(inspect.signature(obj, eval_str=True))
    except (NameError, TypeError, ValueError):
        # annotations naming TYPE_CHECKING-only imports cannot be evaluated
        pass
    try:
        return str(inspect.signature(obj))
    except (TypeError, ValueError):
        return "(...)"


def _function_line(name: str, func: Any) -> str:
    prefix = "async def" if inspect.iscoroutinefunction(func) or inspect.isasyncgenfunction(func) else "def"
    return f"{prefix} {name}{_signature(func)}"


def _describe_member(name: str, member: Any) -> str | None:
    if isinstance(member, property):
        return f"{name}: property"
    if isinstance(member, staticmethod):
        return f"@staticmethod {_function_line(name, member.__func__)}"
    if isinstance(member, classmethod):
        return f"@classmethod {_function_line(name, member.__func__)}"
    if inspect.isfunction(member):
        return _function_line(name, member)
    if inspect.isclass(member):
        return f"class {name}"
    if callable(member):
        return None
    return f"{name}: {type(member).__name__}"


def _describe_class(name: str, cls: type, include_private: bool) -> list[str]:
    bases = ", ".join(base.__qualname__ for base in cls.__bases__ if base is not object)
    header = f"class {name}({bases})" if bases else f"class {name}"

    members: list[str] = []
    if issubclass(cls, enum.Enum):
        members.extend(f"{member.name} = {member.value!r}" for member in cls)
    else:
        for member_name, member in vars(cls).items():
            if not _is_public(member_name, include_private):
                continue
            line = _describe_member(member_name, member)
            if line is not None:
                members.append(line)

    return [header, *(f"{_INDENT}{line}" for line in sorted(members))]


def _public_names(module: ModuleType, include_private: bool) -> list[str]:
    exported = getattr(module, "__all__", None)
    if exported is not None:
        return [name for name in exported if _is_public(name, include_private)]

    names = []
    for name, obj in vars(module).items():
        if name.startswith("__") or not _is_public(name, include_private) or inspect.ismodule(obj):
            continue
        if (inspect.isclass(obj) or inspect.isfunction(obj)) and obj.__module__ != module.__name__:
            continue
        names.append(name)
    return names


def describe_module(module: ModuleType, *, include_private: bool = False) -> list[str]:
    """Return the sorted API surface lines of ``module``.

    Args:
        module: An imported module.
        include_private: Also list names starting with an underscore.
    """
    blocks: list[tuple[str, list[str]]] = []
    for name in _public_names(module, include_private):
        obj = getattr(module, name)
        if inspect.isclass(obj):
            lines = _describe_class(name, obj, include_private)
        elif inspect.isfunction(obj) or inspect.isbuiltin(obj):
            lines = [_function_line(name, obj)]
        elif inspect.ismodule(obj):
            lines = [f"module {name}"]
        else:
            lines = [f"{name}: {type(obj).__name__} = {obj!r}"]
        blocks.append((name, lines))

    blocks.sort(key=lambda block: block[0])
    return [line for _, lines in blocks for line in lines]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flags-openfeature-api-surface",
        description="Print the public API surface of a Python module",
    )
    parser.add_argument("module", help="Dotted module name, e.g. flags_openfeature")
    parser.add_argument("--output", "-o", help="Write to this file instead of stdout")
    parser.add_argument("--private", action="store_true", help="Include names starting with an underscore")
    args = parser.parse_args(argv)

    try:
        module = importlib.import_module(args.module)
    except ImportError as exc:
        print(f"error: cannot import {args.module}: {exc}", file=sys.stderr)
        return 1

    text = "\n".join(describe_module(module, include_private=args.private)) + "\n"
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
