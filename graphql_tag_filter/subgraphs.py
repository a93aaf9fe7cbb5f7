import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import AbstractSet, Optional, TypeVar, Union

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    Visitor,
    visit,
)

from graphql_tag_filter.filter_subgraph import TagDirectiveTransform, apply_tag_filter_to_subgraph
from graphql_tag_filter.tag_filter import TagFilter
from graphql_tag_filter.utilities.sets import intersect_sets

logger = logging.getLogger(__name__)


@dataclass
class Subgraph:
    name: str
    type_defs: DocumentNode


TSubgraph = TypeVar('TSubgraph', bound=Subgraph)

MemberTypeNode = Union[
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
]


class InaccessibleTypesVisitor(Visitor):
    def __init__(self, types: AbstractSet[str], transform_tag_directives: TagDirectiveTransform):
        super().__init__()
        self.types = types
        self.transform_tag_directives = transform_tag_directives

    def enter_object_type_definition(
        self, node: MemberTypeNode, *_
    ) -> Optional[MemberTypeNode]:
        if node.name.value not in self.types:
            return None
        return self.transform_tag_directives.rewrite(node, True)

    enter_object_type_extension = enter_object_type_definition
    enter_interface_type_definition = enter_object_type_definition
    enter_interface_type_extension = enter_object_type_definition
    enter_input_object_type_definition = enter_object_type_definition
    enter_input_object_type_extension = enter_object_type_definition
    enter_enum_type_definition = enter_object_type_definition
    enter_enum_type_extension = enter_object_type_definition


def make_types_from_set_inaccessible(
    document: DocumentNode,
    types: AbstractSet[str],
    transform_tag_directives: TagDirectiveTransform,
) -> DocumentNode:
    return visit(document, InaccessibleTypesVisitor(types, transform_tag_directives))


def apply_tag_filter_on_subgraphs(
    subgraphs: Sequence[TSubgraph], tag_filter: TagFilter
) -> list[TSubgraph]:
    """Apply a tag filter to a set of subgraphs.

    Members are filtered per subgraph. A type only becomes inaccessible as a
    whole when all of its fields (or enum values) are inaccessible in *every*
    subgraph defining it; as long as one subgraph still exposes one member,
    the type stays visible in all of them.

    Subgraphs are returned in the same order, as copies carrying the filtered
    ``type_defs``; any other attribute is left untouched.
    """
    filter_results = [
        apply_tag_filter_to_subgraph(subgraph.type_defs, tag_filter) for subgraph in subgraphs
    ]

    intersection_of_types_where_all_fields_are_inaccessible = intersect_sets(
        result.types_where_all_fields_are_inaccessible for result in filter_results
    )
    logger.debug(
        'Types with all fields inaccessible in every subgraph: %s',
        sorted(intersection_of_types_where_all_fields_are_inaccessible),
    )

    if not intersection_of_types_where_all_fields_are_inaccessible:
        return [
            replace(subgraph, type_defs=result.type_defs)
            for subgraph, result in zip(subgraphs, filter_results)
        ]

    return [
        replace(
            subgraph,
            type_defs=make_types_from_set_inaccessible(
                result.type_defs,
                intersection_of_types_where_all_fields_are_inaccessible,
                result.transform_tag_directives,
            ),
        )
        for subgraph, result in zip(subgraphs, filter_results)
    ]
