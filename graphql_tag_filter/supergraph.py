from typing import Optional

from graphql import DirectiveNode, DocumentNode, Visitor, visit

from graphql_tag_filter.link import get_tag_directive_name_from_supergraph
from graphql_tag_filter.tags import get_tag_from_directive


class TagCollectingVisitor(Visitor):
    def __init__(self, tag_directive_name: str):
        super().__init__()
        self.tag_directive_name = tag_directive_name
        # dict keeps first-seen order
        self.tags: dict[str, None] = {}

    def enter_directive(self, node: DirectiveNode, *_) -> None:
        tag = get_tag_from_directive(node, self.tag_directive_name)
        if tag:
            self.tags[tag] = None


def extract_tags_from_supergraph(document: DocumentNode) -> Optional[list[str]]:
    """Extract all distinct tags used in a supergraph document.

    Returns None if the supergraph does not link the tag specification, and an
    empty list if it does but no tag is used.
    """
    if not isinstance(document, DocumentNode):
        raise TypeError(f'Expected a DocumentNode, got {type(document).__name__}.')

    tag_directive_name = get_tag_directive_name_from_supergraph(document)
    if tag_directive_name is None:
        return None

    visitor = TagCollectingVisitor(tag_directive_name)
    visit(document, visitor)

    return list(visitor.tags)
