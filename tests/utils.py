from textwrap import dedent
from typing import Any

from graphql import DocumentNode, parse


def parse_sdl(sdl: str) -> DocumentNode:
    return parse(dedent(sdl))


def get_definitions(document: DocumentNode, name: str) -> list[Any]:
    return [
        definition
        for definition in document.definitions
        if getattr(definition, 'name', None) is not None and definition.name.value == name
    ]


def get_definition(document: DocumentNode, name: str) -> Any:
    (definition,) = get_definitions(document, name)
    return definition


def get_member(type_node: Any, name: str) -> Any:
    members = getattr(type_node, 'fields', None) or getattr(type_node, 'values', None) or ()
    (member,) = [member for member in members if member.name.value == name]
    return member


def get_argument_definition(field_node: Any, name: str) -> Any:
    (argument,) = [argument for argument in field_node.arguments if argument.name.value == name]
    return argument


def directive_names(node: Any) -> list[str]:
    return [directive.name.value for directive in node.directives or ()]
