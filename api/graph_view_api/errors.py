"""Error taxonomy for graph models and viewer sessions."""


class GraphModelError(ValueError):
    """Base class for rejected graph models."""


class DuplicateIdError(GraphModelError):
    def __init__(self, kind: str, element_id: str):
        self.kind = kind
        self.element_id = element_id
        super().__init__(f"Duplicate {kind} id '{element_id}'.")


class DanglingReferenceError(GraphModelError):
    def __init__(self, edge_id: str, missing_node_id: str):
        self.edge_id = edge_id
        self.missing_node_id = missing_node_id
        super().__init__(f"Edge '{edge_id}' references missing node '{missing_node_id}'.")


class MixedLayoutError(GraphModelError):
    def __init__(self, positioned: list, unpositioned: list):
        self.positioned = list(positioned)
        self.unpositioned = list(unpositioned)
        super().__init__(
            "Either every node or no node must carry a position; "
            f"missing on {self.unpositioned!r}."
        )


class ViewerError(RuntimeError):
    """Base class for viewer lifecycle violations."""


class SessionClosedError(ViewerError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Viewer session '{session_id}' is closed.")


class DoubleMountError(ViewerError):
    def __init__(self, surface, session_id: str):
        self.surface = surface
        self.session_id = session_id
        super().__init__(f"Surface {surface!r} is already bound to live session '{session_id}'.")
