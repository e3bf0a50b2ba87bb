"""Node models for the API flow graph.

Each node kind carries its own data model, and nodes are a tagged union
keyed by ``type`` so a loaded design never holds fields that do not belong
to its kind. Wire names stay camelCase (``queryType``, ``statusCode``) to
match what the canvas stores; Python attributes are snake_case.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class NodeKind(str, Enum):
    """The closed set of node kinds."""

    start = "start"
    http_request = "httpRequest"
    database_query = "databaseQuery"
    response = "response"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class QueryType(str, Enum):
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Position(BaseModel):
    """canvas coordinate of a node's top-left corner."""

    x: float
    y: float


# --- Per-kind data ---


class NodeData(BaseModel):
    """fields shared by every kind."""

    model_config = ConfigDict(populate_by_name=True)

    label: str


class StartData(NodeData):
    description: str = ""


class HttpRequestData(NodeData):
    method: HttpMethod = HttpMethod.GET
    url: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""


class DatabaseQueryData(NodeData):
    table: str = ""
    query_type: QueryType = Field(default=QueryType.SELECT, alias="queryType")
    query: str = ""


class ResponseData(NodeData):
    status_code: int = Field(default=200, alias="statusCode")
    body: str = "{}"


# --- Nodes ---


class StartNode(BaseModel):
    id: str
    type: Literal["start"] = "start"
    position: Position
    data: StartData


class HttpRequestNode(BaseModel):
    id: str
    type: Literal["httpRequest"] = "httpRequest"
    position: Position
    data: HttpRequestData


class DatabaseQueryNode(BaseModel):
    id: str
    type: Literal["databaseQuery"] = "databaseQuery"
    position: Position
    data: DatabaseQueryData


class ResponseNode(BaseModel):
    id: str
    type: Literal["response"] = "response"
    position: Position
    data: ResponseData


Node = Annotated[
    Union[StartNode, HttpRequestNode, DatabaseQueryNode, ResponseNode],
    Field(discriminator="type"),
]

node_adapter: TypeAdapter[Node] = TypeAdapter(Node)

NODE_CLASSES: dict[NodeKind, type[BaseModel]] = {
    NodeKind.start: StartNode,
    NodeKind.http_request: HttpRequestNode,
    NodeKind.database_query: DatabaseQueryNode,
    NodeKind.response: ResponseNode,
}

DATA_CLASSES: dict[NodeKind, type[NodeData]] = {
    NodeKind.start: StartData,
    NodeKind.http_request: HttpRequestData,
    NodeKind.database_query: DatabaseQueryData,
    NodeKind.response: ResponseData,
}


def build_node(kind: NodeKind | str, node_id: str, label: str, position: Position) -> Node:
    """Create a node of the given kind with that kind's default data."""
    kind = NodeKind(kind)
    data = DATA_CLASSES[kind](label=label)
    return NODE_CLASSES[kind](id=node_id, position=position, data=data)


def merge_node_data(data: NodeData, partial: dict) -> NodeData:
    """Shallow-merge ``partial`` into ``data`` and revalidate.

    Keys may be given by wire name or attribute name. Keys that do not
    belong to the data model are dropped.
    """
    merged = data.model_dump(by_alias=True)
    aliases = {
        name: field.alias
        for name, field in type(data).model_fields.items()
        if field.alias
    }
    for key, value in partial.items():
        merged[aliases.get(key, key)] = value
    return type(data).model_validate(merged)


# --- Palette ---


class PaletteEntry(BaseModel):
    """a button in the node palette."""

    kind: NodeKind
    label: str
    icon: str
    description: str


PALETTE: dict[NodeKind, PaletteEntry] = {
    NodeKind.start: PaletteEntry(
        kind=NodeKind.start,
        label="Start",
        icon="🚀",
        description="Beginning of API flow",
    ),
    NodeKind.http_request: PaletteEntry(
        kind=NodeKind.http_request,
        label="HTTP Request",
        icon="🌐",
        description="Outbound HTTP request",
    ),
    NodeKind.database_query: PaletteEntry(
        kind=NodeKind.database_query,
        label="Database Query",
        icon="🗄️",
        description="Database interaction",
    ),
    NodeKind.response: PaletteEntry(
        kind=NodeKind.response,
        label="Response",
        icon="📤",
        description="Final API response",
    ),
}
