"""Markdown documentation generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from arucas_docs.config import RenderSettings
from arucas_docs.models import (
    ClassDoc,
    FunctionDoc,
    MemberDoc,
    ParamDoc,
    SchemaError,
    is_documented_function,
    is_documented_member,
    parse_function,
)
from arucas_docs.schema import Document

logger = logging.getLogger(__name__)


def _format_example(value: str) -> str:
    return value.replace("\t", "    ").rstrip("\n")


_TEMPLATE_ENV = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent / "templates"),
    trim_blocks=True,
    lstrip_blocks=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)
_TEMPLATE_ENV.filters["example"] = _format_example

_DEFAULT_SETTINGS = RenderSettings()


@dataclass
class Coverage:
    """Documented versus total entries found in a document."""

    functions: int = 0
    documented_functions: int = 0
    members: int = 0
    documented_members: int = 0

    @property
    def skipped_functions(self) -> int:
        return self.functions - self.documented_functions

    @property
    def skipped_members(self) -> int:
        return self.members - self.documented_members


def render_function(
    namespace: str | None,
    function: FunctionDoc,
    settings: RenderSettings = _DEFAULT_SETTINGS,
) -> str | None:
    """Render *function* under *namespace*.

    Returns ``None`` when the function has no examples, which marks it as
    not yet documented.
    """
    if not is_documented_function(function):
        logger.debug("Skipping undocumented function %s", _qualify(namespace, function.name))
        return None
    if function.description is None:
        raise SchemaError(f"function '{_qualify(namespace, function.name)}' must define 'desc'")
    return _TEMPLATE_ENV.get_template("function.md.j2").render(
        namespace=namespace,
        function=function,
        fence=settings.code_fence,
    )


def render_members(
    namespace: str,
    members: Iterable[MemberDoc],
    settings: RenderSettings = _DEFAULT_SETTINGS,
) -> str:
    """Render the documented entries of *members* under *namespace*."""
    documented = []
    for member in members:
        if not is_documented_member(member):
            logger.debug("Skipping undocumented member %s.%s", namespace, member.name)
            continue
        for key, value in (
            ("desc", member.description),
            ("type", member.type_name),
            ("examples", member.examples),
        ):
            if value is None:
                raise SchemaError(f"member '{namespace}.{member.name}' must define '{key}'")
        documented.append(member)
    return _macro("members")(namespace, documented, settings.code_fence)


def render_params(params: list[ParamDoc]) -> str:
    """Render parameter details for a non-empty *params* list."""
    return _macro("params")(params)


def render_examples(examples: list[str], settings: RenderSettings = _DEFAULT_SETTINGS) -> str:
    """Render *examples* as fenced code blocks."""
    return _macro("examples")(examples, settings.code_fence)


def render_class(cls: ClassDoc, settings: RenderSettings = _DEFAULT_SETTINGS) -> str:
    """Render the Markdown section for *cls*."""
    instance = f"<{cls.name}>"
    return _TEMPLATE_ENV.get_template("class.md.j2").render(
        cls=cls,
        language=settings.language,
        fence=settings.code_fence,
        static_members=render_members(cls.name, cls.static_members or [], settings),
        members=render_members(instance, cls.members or [], settings),
        methods=_join_functions(instance, cls.methods or [], settings),
        static_methods=_join_functions(cls.name, cls.static_methods or [], settings),
    )


def render_extension(
    name: str,
    functions: list[Any],
    settings: RenderSettings = _DEFAULT_SETTINGS,
) -> str:
    """Render the extension group *name* from its raw function objects."""
    parsed = [parse_function(value) for value in functions]
    return _TEMPLATE_ENV.get_template("extension.md.j2").render(
        name=name,
        functions=_join_functions(None, parsed, settings),
    )


def render_classes(document: Document, settings: RenderSettings = _DEFAULT_SETTINGS) -> str:
    """Render every class of *document*, separated by blank lines."""
    return "\n\n".join(render_class(cls, settings) for cls in document.iter_classes())


def render_extensions(document: Document, settings: RenderSettings = _DEFAULT_SETTINGS) -> str:
    """Render every extension group of *document*, separated by blank lines."""
    return "\n\n".join(
        render_extension(name, functions, settings)
        for name, functions in document.iter_extensions()
    )


def collect_coverage(document: Document) -> Coverage:
    """Count documented and total functions and members in *document*."""
    coverage = Coverage()

    def add_functions(functions: Iterable[FunctionDoc]) -> None:
        for function in functions:
            coverage.functions += 1
            if is_documented_function(function):
                coverage.documented_functions += 1

    for cls in document.iter_classes():
        add_functions(cls.methods or [])
        add_functions(cls.static_methods or [])
        for member in (cls.static_members or []) + (cls.members or []):
            coverage.members += 1
            if is_documented_member(member):
                coverage.documented_members += 1
    for _name, functions in document.iter_extensions():
        add_functions(parse_function(value) for value in functions)
    return coverage


def generate_docs(
    document: Document,
    classes_output: str | Path,
    extensions_output: str | Path,
    settings: RenderSettings = _DEFAULT_SETTINGS,
) -> None:
    """Generate the class and extension references for *document*.

    Both documents are rendered before either file is written.
    """
    classes = render_classes(document, settings)
    extensions = render_extensions(document, settings)
    write_markdown(classes_output, classes)
    write_markdown(extensions_output, extensions)


def write_markdown(output: str | Path, content: str) -> None:
    """Write *content* to *output*, replacing any existing file."""
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", output_path)


def _join_functions(
    namespace: str | None,
    functions: Iterable[FunctionDoc],
    settings: RenderSettings,
) -> str:
    rendered = (render_function(namespace, function, settings) for function in functions)
    return "\n".join(text for text in rendered if text is not None)


def _macro(name: str) -> Any:
    return getattr(_TEMPLATE_ENV.get_template("macros.md.j2").module, name)


def _qualify(namespace: str | None, name: str) -> str:
    return f"{namespace}.{name}" if namespace else name
