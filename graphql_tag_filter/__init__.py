from graphql_tag_filter.filter_subgraph import (
    SubgraphFilterResult,
    TagDirectiveTransform,
    apply_tag_filter_to_subgraph,
    create_transform_tag_directives,
)
from graphql_tag_filter.link import (
    get_federation_directive_name_for_subgraph,
    get_federation_inaccessible_directive_name_for_subgraph,
    get_federation_tag_directive_name_for_subgraph,
    get_imported_directive_name_from_supergraph,
    get_inaccessible_directive_name_from_supergraph,
    get_tag_directive_name_from_supergraph,
)
from graphql_tag_filter.subgraphs import (
    Subgraph,
    apply_tag_filter_on_subgraphs,
    make_types_from_set_inaccessible,
)
from graphql_tag_filter.supergraph import extract_tags_from_supergraph
from graphql_tag_filter.tag_filter import TagFilter
from graphql_tag_filter.tags import get_tags_on_node

__all__ = [
    'Subgraph',
    'SubgraphFilterResult',
    'TagDirectiveTransform',
    'TagFilter',
    'apply_tag_filter_on_subgraphs',
    'apply_tag_filter_to_subgraph',
    'create_transform_tag_directives',
    'extract_tags_from_supergraph',
    'get_federation_directive_name_for_subgraph',
    'get_federation_inaccessible_directive_name_for_subgraph',
    'get_federation_tag_directive_name_for_subgraph',
    'get_imported_directive_name_from_supergraph',
    'get_inaccessible_directive_name_from_supergraph',
    'get_tag_directive_name_from_supergraph',
    'get_tags_on_node',
    'make_types_from_set_inaccessible',
]
