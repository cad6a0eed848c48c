class HtmlSurface:
    """
    Named HTML region the Cytoscape engine draws into.

    The surface only holds the rendered document; it is never measured
    or resized by the viewer.
    """

    def __init__(self, container_id: str = "cy", width: str = "100%", height: str = "700px"):
        self.container_id = container_id
        self.width = width
        self.height = height
        self.content = None

    @property
    def is_empty(self) -> bool:
        return self.content is None

    def write(self, html: str) -> None:
        self.content = html

    def clear(self) -> None:
        self.content = None

    def save(self, path: str) -> None:
        if self.content is None:
            raise ValueError(f"Surface '{self.container_id}' has nothing rendered.")
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.content)

    def __repr__(self) -> str:
        return f"HtmlSurface({self.container_id!r})"
