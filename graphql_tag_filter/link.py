import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from graphql import (
    ArgumentNode,
    DirectiveNode,
    DocumentNode,
    ListValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    StringValueNode,
)

from graphql_tag_filter.utilities.graphql_ import (
    get_argument,
    get_object_field_string,
    get_string_argument_at,
    get_string_value,
)

logger = logging.getLogger(__name__)

FEDERATION_SUBGRAPH_SPECIFICATION_URL = 'https://specs.apollo.dev/federation/'
TAG_SPECIFICATION_URL = 'https://specs.apollo.dev/tag/'
INACCESSIBLE_SPECIFICATION_URL = 'https://specs.apollo.dev/inaccessible/'

SchemaNode = Union[SchemaDefinitionNode, SchemaExtensionNode]


@dataclass
class LinkArguments:
    url: Optional[ArgumentNode]
    import_: Optional[ArgumentNode]


def get_schema_nodes(document: DocumentNode) -> list[SchemaNode]:
    return [
        definition
        for definition in document.definitions
        if isinstance(definition, (SchemaDefinitionNode, SchemaExtensionNode))
    ]


# https://specs.apollo.dev/link/v1.0/#@link
def get_url_and_import_arguments(directive: DirectiveNode) -> LinkArguments:
    return LinkArguments(
        url=get_argument(directive, 'url'), import_=get_argument(directive, 'import')
    )


# https://specs.apollo.dev/link/v1.0/#Import
def resolve_imported_directive_name(
    for_name: str, object_fields: Sequence[ObjectFieldNode]
) -> Optional[str]:
    name = get_object_field_string(object_fields, 'name')
    if name != for_name:
        return None

    alias = get_object_field_string(object_fields, 'as')
    final = alias if alias is not None else name

    # Directive imports are always spelled with a leading `@`.
    if final.startswith('@'):
        return final[1:]

    return None


def _is_federation_link(arguments: LinkArguments) -> bool:
    url = get_string_value(arguments.url.value) if arguments.url is not None else None
    return url is not None and url.startswith(FEDERATION_SUBGRAPH_SPECIFICATION_URL)


def _resolve_from_federation_link(
    arguments: LinkArguments, directive_name: str, prefixed_name: str
) -> str:
    import_ = arguments.import_
    if import_ is None or not isinstance(import_.value, ListValueNode):
        return prefixed_name

    import_name = f'@{directive_name}'
    for item in import_.value.values:
        if isinstance(item, StringValueNode) and item.value == import_name:
            return directive_name

        if isinstance(item, ObjectValueNode) and item.fields:
            resolved = resolve_imported_directive_name(import_name, item.fields)
            if resolved:
                return resolved

    return prefixed_name


def get_federation_directive_name_for_subgraph(
    document: DocumentNode, directive_name: str
) -> str:
    """Resolve the name a federation directive goes by inside a subgraph document.

    A Federation 2 subgraph opts in through
    ``@link(url: "https://specs.apollo.dev/federation/v2.x", import: [...])``.
    Directives it imports keep their name (or take the ``as`` alias); anything
    else is only reachable through the ``federation__`` prefix. A document
    without such a link is a Federation 1 subgraph, where the plain name is
    used.
    """
    prefixed_name = f'federation__{directive_name}'

    for schema_node in get_schema_nodes(document):
        for directive in schema_node.directives or ():
            arguments = get_url_and_import_arguments(directive)
            if _is_federation_link(arguments):
                return _resolve_from_federation_link(arguments, directive_name, prefixed_name)

    # no federation link? this must be Federation 1
    return directive_name


def create_get_federation_directive_name_for_subgraph(
    directive_name: str,
) -> Callable[[DocumentNode], str]:
    def impl(document: DocumentNode) -> str:
        return get_federation_directive_name_for_subgraph(document, directive_name)

    return impl


get_federation_tag_directive_name_for_subgraph = (
    create_get_federation_directive_name_for_subgraph('tag')
)
get_federation_inaccessible_directive_name_for_subgraph = (
    create_get_federation_directive_name_for_subgraph('inaccessible')
)


def get_imported_directive_name_from_supergraph(
    document: DocumentNode, directive_import_url_prefix: str, default_name: str
) -> Optional[str]:
    """Resolve the name a linked directive goes by inside a supergraph document.

    Supergraphs link each specification separately, e.g.
    ``@link(url: "https://specs.apollo.dev/tag/v0.3", as: "myTag")``. Returns
    None when the specification is not linked at all, which is different from
    being linked under its default name.
    """
    schema_nodes = get_schema_nodes(document)
    # Composition emits a single schema definition; later ones are not consulted.
    if not schema_nodes:
        return None

    for directive in schema_nodes[0].directives or ():
        if directive.name.value != 'link':
            continue
        # TODO: relies on composition always emitting `url` first and `as` second
        url = get_string_argument_at(directive, 0, 'url')
        if url is None or not url.startswith(directive_import_url_prefix):
            continue

        alias = get_string_argument_at(directive, 1, 'as')
        return alias if alias is not None else default_name

    return None


def create_get_imported_directive_name_from_supergraph(
    directive_import_url_prefix: str, default_name: str
) -> Callable[[DocumentNode], Optional[str]]:
    def impl(document: DocumentNode) -> Optional[str]:
        name = get_imported_directive_name_from_supergraph(
            document, directive_import_url_prefix, default_name
        )
        logger.debug('Resolved @%s in supergraph as %r', default_name, name)
        return name

    return impl


get_tag_directive_name_from_supergraph = create_get_imported_directive_name_from_supergraph(
    TAG_SPECIFICATION_URL, 'tag'
)
get_inaccessible_directive_name_from_supergraph = (
    create_get_imported_directive_name_from_supergraph(
        INACCESSIBLE_SPECIFICATION_URL, 'inaccessible'
    )
)
