from typing import Optional, Protocol, Sequence

from graphql import DirectiveNode

from graphql_tag_filter.utilities.graphql_ import get_string_argument_at


class DirectableNode(Protocol):
    directives: Optional[Sequence[DirectiveNode]]


# `@tag(name: String!)`; anything shaped differently is not a tag.
def get_tag_from_directive(directive: DirectiveNode, tag_directive_name: str) -> Optional[str]:
    if directive.name.value != tag_directive_name:
        return None
    return get_string_argument_at(directive, 0, 'name')


def get_tags_on_node(node: DirectableNode, tag_directive_name: str) -> frozenset[str]:
    if not node.directives:
        return frozenset()

    tags = (get_tag_from_directive(directive, tag_directive_name) for directive in node.directives)
    return frozenset(tag for tag in tags if tag is not None)
