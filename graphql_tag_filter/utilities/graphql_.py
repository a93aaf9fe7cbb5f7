from typing import Optional, Sequence

from graphql import (
    ArgumentNode,
    DirectiveNode,
    ObjectFieldNode,
    StringValueNode,
    ValueNode,
)


def get_argument(directive: DirectiveNode, name: str) -> Optional[ArgumentNode]:
    for argument in directive.arguments or ():
        if argument.name.value == name:
            return argument
    return None


def get_argument_at(directive: DirectiveNode, index: int) -> Optional[ArgumentNode]:
    arguments = directive.arguments or ()
    return arguments[index] if index < len(arguments) else None


# Returns the raw string of a `String` literal, None for any other literal.
def get_string_value(value: Optional[ValueNode]) -> Optional[str]:
    if isinstance(value, StringValueNode):
        return value.value
    return None


def get_string_argument_at(directive: DirectiveNode, index: int, name: str) -> Optional[str]:
    argument = get_argument_at(directive, index)
    if argument is None or argument.name.value != name:
        return None
    return get_string_value(argument.value)


def get_object_field_string(fields: Sequence[ObjectFieldNode], name: str) -> Optional[str]:
    for field in fields:
        if field.name.value == name:
            return get_string_value(field.value)
    return None
