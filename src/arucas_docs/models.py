"""Typed records for the API documentation tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class SchemaError(ValueError):
    """Raised when an entity is missing a required field or has a wrong shape."""


@dataclass(frozen=True)
class ParamDoc:
    """A single function or constructor parameter."""

    name: str
    type_name: str
    description: str


@dataclass(frozen=True)
class ReturnDoc:
    """Return value of a function."""

    type_name: str
    description: str


@dataclass(frozen=True)
class FunctionDoc:
    """A method, static method or extension function."""

    name: str
    description: list[str] | None = None
    deprecated: list[str] | None = None
    params: list[ParamDoc] | None = None
    returns: ReturnDoc | None = None
    throws: list[str] | None = None
    examples: list[str] | None = None


@dataclass(frozen=True)
class ConstructorDoc:
    """A way to instantiate a class."""

    description: list[str]
    examples: list[str]
    params: list[ParamDoc] | None = None


@dataclass(frozen=True)
class MemberDoc:
    """A static or instance field of a class."""

    name: str
    assignable: bool | None = None
    description: list[str] | None = None
    type_name: str | None = None
    examples: list[str] | None = None


@dataclass(frozen=True)
class ClassDoc:
    """A documented class of the standard library."""

    name: str
    description: list[str] | None = None
    import_path: str | None = None
    static_members: list[MemberDoc] | None = None
    members: list[MemberDoc] | None = None
    constructors: list[ConstructorDoc] | None = None
    methods: list[FunctionDoc] | None = None
    static_methods: list[FunctionDoc] | None = None


def is_documented_function(function: FunctionDoc) -> bool:
    """Return whether *function* carries at least one example."""
    return bool(function.examples)


def is_documented_member(member: MemberDoc) -> bool:
    """Return whether *member* declares its assignability."""
    return member.assignable is not None


def parse_class(value: Any) -> ClassDoc:
    """Map a JSON class object to a :class:`ClassDoc`."""
    obj = _require_object(value, "class")
    name = _required_str(obj, "name", "class")
    what = f"class '{name}'"
    return ClassDoc(
        name=name,
        description=_optional_str_list(obj, "desc", what),
        import_path=_optional_str(obj, "import_path", what),
        static_members=_optional_list(obj, "static_members", what, parse_member),
        members=_optional_list(obj, "members", what, parse_member),
        constructors=_optional_list(obj, "constructors", what, parse_constructor),
        methods=_optional_list(obj, "methods", what, parse_function),
        static_methods=_optional_list(obj, "static_methods", what, parse_function),
    )


def parse_function(value: Any) -> FunctionDoc:
    """Map a JSON function object to a :class:`FunctionDoc`.

    The description stays optional here; functions without examples are
    never rendered and therefore never need one.
    """
    obj = _require_object(value, "function")
    name = _required_str(obj, "name", "function")
    what = f"function '{name}'"
    returns = obj.get("returns")
    return FunctionDoc(
        name=name,
        description=_optional_str_list(obj, "desc", what),
        deprecated=_optional_str_list(obj, "deprecated", what),
        params=_optional_list(obj, "params", what, parse_param),
        returns=None if returns is None else parse_return(returns),
        throws=_optional_str_list(obj, "throws", what),
        examples=_optional_str_list(obj, "examples", what),
    )


def parse_constructor(value: Any) -> ConstructorDoc:
    """Map a JSON constructor object to a :class:`ConstructorDoc`."""
    obj = _require_object(value, "constructor")
    description = _optional_str_list(obj, "desc", "constructor")
    if description is None:
        raise SchemaError("constructor must define 'desc'")
    examples = _optional_str_list(obj, "examples", "constructor")
    if examples is None:
        raise SchemaError("constructor must define 'examples'")
    return ConstructorDoc(
        description=description,
        examples=examples,
        params=_optional_list(obj, "params", "constructor", parse_param),
    )


def parse_member(value: Any) -> MemberDoc:
    """Map a JSON member object to a :class:`MemberDoc`."""
    obj = _require_object(value, "member")
    name = _required_str(obj, "name", "member")
    what = f"member '{name}'"
    assignable = obj.get("assignable")
    if assignable is not None and not isinstance(assignable, bool):
        raise SchemaError(f"{what} 'assignable' must be a boolean")
    return MemberDoc(
        name=name,
        assignable=assignable,
        description=_optional_str_list(obj, "desc", what),
        type_name=_optional_str(obj, "type", what),
        examples=_optional_str_list(obj, "examples", what),
    )


def parse_param(value: Any) -> ParamDoc:
    """Map a JSON parameter object to a :class:`ParamDoc`."""
    obj = _require_object(value, "parameter")
    return ParamDoc(
        name=_required_str(obj, "name", "parameter"),
        type_name=_required_str(obj, "type", "parameter"),
        description=_required_str(obj, "desc", "parameter"),
    )


def parse_return(value: Any) -> ReturnDoc:
    """Map a JSON return object to a :class:`ReturnDoc`."""
    obj = _require_object(value, "return value")
    return ReturnDoc(
        type_name=_required_str(obj, "type", "return value"),
        description=_required_str(obj, "desc", "return value"),
    )


def _require_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(f"{what} must be an object")
    return value


def _required_str(obj: dict[str, Any], key: str, what: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise SchemaError(f"{what} must define string '{key}'")
    return value


def _optional_str(obj: dict[str, Any], key: str, what: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise SchemaError(f"{what} '{key}' must be a string")
    return value


def _optional_str_list(obj: dict[str, Any], key: str, what: str) -> list[str] | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise SchemaError(f"{what} '{key}' must be a list of strings")
    return list(value)


def _optional_list(
    obj: dict[str, Any],
    key: str,
    what: str,
    parse: Callable[[Any], T],
) -> list[T] | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise SchemaError(f"{what} '{key}' must be a list")
    return [parse(item) for item in value]
