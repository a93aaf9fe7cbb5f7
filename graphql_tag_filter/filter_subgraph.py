import logging
from copy import copy
from dataclasses import dataclass
from typing import TypeVar, Union

from graphql import (
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    NameNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    Visitor,
    visit,
)

from graphql_tag_filter.link import (
    get_federation_inaccessible_directive_name_for_subgraph,
    get_federation_tag_directive_name_for_subgraph,
)
from graphql_tag_filter.tag_filter import TagFilter
from graphql_tag_filter.tags import DirectableNode, get_tags_on_node
from graphql_tag_filter.utilities.sets import set_difference

logger = logging.getLogger(__name__)

TNode = TypeVar('TNode', bound=DirectableNode)

FieldLikeTypeNode = Union[
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
]

EnumNode = Union[EnumTypeDefinitionNode, EnumTypeExtensionNode]

ScalarOrUnionNode = Union[
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
]

MemberNode = Union[FieldDefinitionNode, InputValueDefinitionNode, EnumValueDefinitionNode]


@dataclass(frozen=True)
class TagDirectiveTransform:
    """Rewrites directives of nodes from one subgraph document.

    Bound to the names `@tag` and `@inaccessible` resolved for that document,
    so that every pass over the document agrees on them.
    """

    tag_directive_name: str
    inaccessible_directive_name: str

    def __call__(
        self, node: DirectableNode, include_inaccessible: bool = False
    ) -> tuple[DirectiveNode, ...]:
        has_inaccessible_directive = False
        directives = []
        for directive in node.directives or ():
            name = directive.name.value
            if name == self.inaccessible_directive_name:
                has_inaccessible_directive = True
            if name != self.tag_directive_name:
                directives.append(directive)

        if include_inaccessible and not has_inaccessible_directive:
            directives.append(
                DirectiveNode(name=NameNode(value=self.inaccessible_directive_name), arguments=())
            )

        return tuple(directives)

    def get_tags(self, node: DirectableNode) -> frozenset[str]:
        return get_tags_on_node(node, self.tag_directive_name)

    def rewrite(self, node: TNode, include_inaccessible: bool = False) -> TNode:
        new_node = copy(node)
        new_node.directives = self(node, include_inaccessible)
        return new_node


def create_transform_tag_directives(
    tag_directive_name: str, inaccessible_directive_name: str
) -> TagDirectiveTransform:
    return TagDirectiveTransform(tag_directive_name, inaccessible_directive_name)


@dataclass
class SubgraphFilterResult:
    type_defs: DocumentNode
    types_where_all_fields_are_inaccessible: set[str]
    transform_tag_directives: TagDirectiveTransform


class TagFilterVisitor(Visitor):
    # Since GraphQL allows extending types, a type name can occur multiple
    # times. Any occurrence with an accessible member keeps the type from
    # being fully inaccessible, so both outcomes are recorded and subtracted
    # at the end.
    types_where_all_fields_are_inaccessible: set[str]
    types_where_not_all_fields_are_inaccessible: set[str]

    def __init__(self, tag_filter: TagFilter, transform_tag_directives: TagDirectiveTransform):
        super().__init__()
        self.tag_filter = tag_filter
        self.transform_tag_directives = transform_tag_directives
        self.types_where_all_fields_are_inaccessible = set()
        self.types_where_not_all_fields_are_inaccessible = set()

    def _filter_node(self, node: TNode) -> tuple[TNode, bool]:
        is_excluded = self.tag_filter.excludes(self.transform_tag_directives.get_tags(node))
        return self.transform_tag_directives.rewrite(node, is_excluded), is_excluded

    def _filter_member(self, member: MemberNode) -> tuple[MemberNode, bool]:
        if isinstance(member, FieldDefinitionNode) and member.arguments:
            arguments = tuple(self._filter_node(argument)[0] for argument in member.arguments)
            member = copy(member)
            member.arguments = arguments

        return self._filter_node(member)

    def _filter_type(self, node: Union[FieldLikeTypeNode, EnumNode], members_key: str):
        is_all_fields_inaccessible = True
        new_node = copy(node)

        members = getattr(node, members_key)
        if members is not None:
            new_members = []
            for member in members:
                new_member, is_excluded = self._filter_member(member)
                if not is_excluded:
                    is_all_fields_inaccessible = False
                new_members.append(new_member)
            setattr(new_node, members_key, tuple(new_members))

        if self.tag_filter.excludes_type(self.transform_tag_directives.get_tags(node)):
            new_node.directives = self.transform_tag_directives(node, True)
            return new_node

        if is_all_fields_inaccessible:
            self.types_where_all_fields_are_inaccessible.add(node.name.value)
        else:
            self.types_where_not_all_fields_are_inaccessible.add(node.name.value)

        new_node.directives = self.transform_tag_directives(node)
        return new_node

    def enter_object_type_definition(self, node: FieldLikeTypeNode, *_) -> FieldLikeTypeNode:
        return self._filter_type(node, 'fields')

    enter_object_type_extension = enter_object_type_definition
    enter_interface_type_definition = enter_object_type_definition
    enter_interface_type_extension = enter_object_type_definition
    enter_input_object_type_definition = enter_object_type_definition
    enter_input_object_type_extension = enter_object_type_definition

    def enter_enum_type_definition(self, node: EnumNode, *_) -> EnumNode:
        return self._filter_type(node, 'values')

    enter_enum_type_extension = enter_enum_type_definition

    def enter_scalar_type_definition(self, node: ScalarOrUnionNode, *_) -> ScalarOrUnionNode:
        new_node, _is_excluded = self._filter_node(node)
        return new_node

    enter_scalar_type_extension = enter_scalar_type_definition
    enter_union_type_definition = enter_scalar_type_definition
    enter_union_type_extension = enter_scalar_type_definition


def apply_tag_filter_to_subgraph(
    document: DocumentNode, tag_filter: TagFilter
) -> SubgraphFilterResult:
    """Mark every node of a subgraph not passing ``tag_filter`` as inaccessible.

    Tag directives are removed from every rewritten node. The returned
    ``types_where_all_fields_are_inaccessible`` still has to be reconciled
    with the other subgraphs before those types themselves can be made
    inaccessible, which is what ``apply_tag_filter_on_subgraphs`` does; prefer
    that one unless you need the intermediate result.
    """
    if not isinstance(document, DocumentNode):
        raise TypeError(f'Expected a DocumentNode, got {type(document).__name__}.')

    transform_tag_directives = create_transform_tag_directives(
        get_federation_tag_directive_name_for_subgraph(document),
        get_federation_inaccessible_directive_name_for_subgraph(document),
    )
    logger.debug(
        'Filtering subgraph with @tag as @%s and @inaccessible as @%s',
        transform_tag_directives.tag_directive_name,
        transform_tag_directives.inaccessible_directive_name,
    )

    visitor = TagFilterVisitor(tag_filter, transform_tag_directives)
    type_defs = visit(document, visitor)

    types_where_all_fields_are_inaccessible = set_difference(
        visitor.types_where_all_fields_are_inaccessible,
        visitor.types_where_not_all_fields_are_inaccessible,
    )
    logger.debug(
        'Types with all fields inaccessible: %s', sorted(types_where_all_fields_are_inaccessible)
    )

    return SubgraphFilterResult(
        type_defs=type_defs,
        types_where_all_fields_are_inaccessible=types_where_all_fields_are_inaccessible,
        transform_tag_directives=transform_tag_directives,
    )
